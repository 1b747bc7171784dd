"""Integer rectangles that grow to cover points."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Rectangle:
    """Axis-aligned rectangle; a width of zero marks it as empty."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def expand_to_include_point(self, x: int, y: int) -> None:
        """Grow the rectangle so that it covers the pixel at (x, y)."""
        if self.width == 0:
            self.x, self.y = x, y
            self.width = self.height = 1
            return
        if x < self.x:
            self.width += self.x - x
            self.x = x
        elif x >= self.x + self.width:
            self.width = x - self.x + 1
        if y < self.y:
            self.height += self.y - y
            self.y = y
        elif y >= self.y + self.height:
            self.height = y - self.y + 1

    def copy(self) -> "Rectangle":
        """Return an independent copy."""
        return replace(self)