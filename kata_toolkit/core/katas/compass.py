from __future__ import annotations

from dataclasses import dataclass


CARDINALS: tuple[str, ...] = ("N", "E", "S", "W")
POINT_STEP = 11.25
POINTS_PER_QUADRANT = 8


@dataclass(frozen=True)
class CompassPoint:
    abbreviation: str
    azimuth: float


def create_compass_points() -> list[CompassPoint]:
    """Return the 32 points of the compass, clockwise from north.

    Names are derived from the four cardinal directions only: each quadrant
    runs from one cardinal (``N``) to the next (``E``) through the
    intercardinal between them (``NE``).
    """
    points: list[CompassPoint] = []
    for quadrant, first in enumerate(CARDINALS):
        second = CARDINALS[(quadrant + 1) % len(CARDINALS)]
        # North/south always lead: NE, SE, SW, NW.
        middle = first + second if first in ("N", "S") else second + first
        names = [
            first,
            f"{first}b{second}",
            first + middle,
            f"{middle}b{first}",
            middle,
            f"{middle}b{second}",
            second + middle,
            f"{second}b{first}",
        ]
        for offset, name in enumerate(names):
            index = quadrant * POINTS_PER_QUADRANT + offset
            points.append(CompassPoint(abbreviation=name, azimuth=index * POINT_STEP))
    return points
