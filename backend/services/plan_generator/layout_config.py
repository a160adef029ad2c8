"""
Layout constants for the central-hub floor plan generator.

Every component receives a ``LayoutConfig`` explicitly instead of reading
module-level globals, so alternate envelopes can be generated side by side.
All lengths are SVG user units (1 unit = 1 px at 100% zoom).
"""

from dataclasses import dataclass, field, replace
from typing import Mapping, Tuple, Union

WeightPairs = Tuple[Tuple[str, float], ...]

DEFAULT_WEIGHTS: WeightPairs = (
    ("office", 1.0),
    ("meeting", 3.0),   # meeting rooms take the largest share
    ("toilet", 0.4),
)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Immutable geometry and sizing rules for one building envelope.

    ``weights`` may be given as a mapping or as ``(category, weight)`` pairs;
    it is stored as a sorted tuple of pairs so the config stays hashable and
    cannot be changed in place.
    """

    # Envelope
    width: float = 1200
    height: float = 800
    ring_thickness: float = 200

    # Strip partitioning
    min_toilet_width: float = 100
    toilet_overflow_cap: float = 180
    capped_toilet_width: float = 140
    server_filler_threshold: float = 160

    # Entrance / doors
    entrance_width: float = 250
    door_size: float = 40
    exit_marker_half_length: float = 40
    entrance_erasure_inset: float = 4

    # Drawing
    grid_size: float = 20

    weights: Union[WeightPairs, Mapping[str, float]] = field(default=DEFAULT_WEIGHTS)

    # Raise instead of emitting overlapping rooms when a strip is over-full
    strict: bool = False

    def __post_init__(self):
        pairs = self.weights.items() if isinstance(self.weights, Mapping) else self.weights
        frozen = tuple(sorted((str(k), float(v)) for k, v in pairs))
        for category, weight in frozen:
            if weight <= 0:
                raise ValueError(f"weight for '{category}' must be positive, got {weight}")
        object.__setattr__(self, "weights", frozen)

    @property
    def central_x_range(self):
        """Horizontal span of the central public rectangle."""
        return self.ring_thickness, self.width - self.ring_thickness

    @property
    def central_y_range(self):
        """Vertical span of the central public rectangle."""
        return self.ring_thickness, self.height - self.ring_thickness

    def weight_for(self, category: str) -> float:
        return dict(self.weights).get(category, 1.0)

    def with_overrides(self, **changes) -> "LayoutConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "ring_thickness": self.ring_thickness,
            "min_toilet_width": self.min_toilet_width,
            "toilet_overflow_cap": self.toilet_overflow_cap,
            "capped_toilet_width": self.capped_toilet_width,
            "server_filler_threshold": self.server_filler_threshold,
            "entrance_width": self.entrance_width,
            "door_size": self.door_size,
            "weights": dict(self.weights),
            "strict": self.strict,
        }


DEFAULT_LAYOUT = LayoutConfig()
