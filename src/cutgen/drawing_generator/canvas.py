"""
Canvas configuration for cutting files.

The canvas is identical for every document in a batch; only the drawn
piece scales. Tests and callers that need another sheet size build their
own CanvasConfig instead of touching the module constants.

The configuration can be written in YAML:

    width: 800
    height: 600
    padding: 60
    dimension_offset: 30
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DIMENSION_OFFSET,
    PADDING,
    REGISTRATION_INSET,
    REGISTRATION_SIZE,
)
from .view_area import ViewArea


@dataclass(frozen=True)
class CanvasConfig:
    """
    Fixed document geometry shared by every generated drawing.

    Attributes:
        width: Canvas width in logical units
        height: Canvas height in logical units
        padding: Free margin on every side of the drawable area
        dimension_offset: Distance from the piece edge to its dimension lines
        registration_inset: Distance of the registration marks from the corners
        registration_size: Arm length of each registration mark
    """

    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    padding: float = PADDING
    dimension_offset: float = DIMENSION_OFFSET
    registration_inset: float = REGISTRATION_INSET
    registration_size: float = REGISTRATION_SIZE

    def __post_init__(self):
        # Values coming from YAML may be strings or ints
        for name in ("width", "height", "padding", "dimension_offset",
                     "registration_inset", "registration_size"):
            object.__setattr__(self, name, float(getattr(self, name)))

        if self.width <= 2 * self.padding or self.height <= 2 * self.padding:
            raise ValueError(
                f"Canvas {self.width}x{self.height} leaves no drawable area "
                f"with padding {self.padding}"
            )

    @property
    def area(self) -> ViewArea:
        """The full canvas."""
        return ViewArea(x=0.0, y=0.0, width=self.width, height=self.height)

    @property
    def drawable_area(self) -> ViewArea:
        """The padded area the piece must fit inside."""
        return self.area.inset(self.padding)

    @property
    def corner_points(self) -> list[tuple[float, float]]:
        """Registration mark positions, clockwise from top-left."""
        inset = self.registration_inset
        return [
            (inset, inset),
            (self.width - inset, inset),
            (self.width - inset, self.height - inset),
            (inset, self.height - inset),
        ]

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "CanvasConfig":
        """Create a config from a mapping, ignoring unknown keys."""
        data = data or {}
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "CanvasConfig":
        """Load canvas configuration from a YAML file."""
        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Canvas config must be a mapping: {yaml_path}")
        return cls.from_dict(data)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save canvas configuration to a YAML file."""
        with open(yaml_path, "w", encoding="utf-8") as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=False)


DEFAULT_CANVAS = CanvasConfig()
