"""
ViewArea class for rectangular regions of a cutting-file canvas.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ViewArea:
    """
    A rectangular region of the canvas.

    Used for the padded drawable area, the piece bounding box and the
    contrast panel behind it.

    Attributes:
        x: Left edge position
        y: Top edge position
        width: Width of the area
        height: Height of the area
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge x-coordinate."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge y-coordinate."""
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        """Center point as (x, y) tuple."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def size(self) -> Tuple[float, float]:
        """Size as (width, height) tuple."""
        return (self.width, self.height)

    def inset(self, margin: float) -> 'ViewArea':
        """Return a new ViewArea inset by the given margin on all sides."""
        return ViewArea(
            x=self.x + margin,
            y=self.y + margin,
            width=self.width - 2 * margin,
            height=self.height - 2 * margin
        )

    def expand(self, margin: float) -> 'ViewArea':
        """Return a new ViewArea grown by the given margin on all sides."""
        return self.inset(-margin)

    def contains(self, other: 'ViewArea', tolerance: float = 1e-9) -> bool:
        """True if other lies completely inside this area."""
        return (other.x >= self.x - tolerance
                and other.y >= self.y - tolerance
                and other.right <= self.right + tolerance
                and other.bottom <= self.bottom + tolerance)

    def svg_rect(self, stroke: str = "none", stroke_width: float = 0,
                 fill: str = "none", **attrs) -> str:
        """
        Generate an SVG rect element for this area.

        Extra keyword attributes use underscores for hyphens; a trailing
        underscore is dropped (class_ -> class).
        """
        extra = ' '.join(f'{k.rstrip("_").replace("_", "-")}="{v}"' for k, v in attrs.items())
        extra_str = f" {extra}" if extra else ""
        return (f'<rect x="{self.x}" y="{self.y}" width="{self.width}" '
                f'height="{self.height}" fill="{fill}" stroke="{stroke}" '
                f'stroke-width="{stroke_width}"{extra_str}/>')
