"""Plain object helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a derived area.

    Example::

        r = Rectangle(10, 20)
        r.width      # 10
        r.get_area() # 200
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    get_area = area
