from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
