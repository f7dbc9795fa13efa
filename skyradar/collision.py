"""Crash detection between planes, bucketed by screen quadrant."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from skyradar.actors import HITBOX_SIZE, Plane, Tower
from skyradar.geometry import Vector, distance

CENTRE = (960.0, 540.0)
LANDMARK = (585.0, 474.0)
LANDMARK_RADIUS = 40.0


def quadrant(position: Vector) -> int:
    """Index 0 to 3 of the screen quarter holding ``position``."""
    return int(position[0] > CENTRE[0]) + int(position[1] > CENTRE[1]) * 2


def planes_collide(first: Plane, second: Plane, towers: Iterable[Tower]) -> bool:
    """Tell whether two distinct planes touch outside every tower's shelter."""
    if first is second:
        return False
    for tower in towers:
        if tower.covers(first.position, HITBOX_SIZE) or tower.covers(second.position):
            return False
    (ax, ay), (bx, by) = first.position, second.position
    return (
        ax < bx + HITBOX_SIZE
        and ax + HITBOX_SIZE > bx
        and ay < by + HITBOX_SIZE
        and ay + HITBOX_SIZE > by
    )


def find_crashes(actors: Sequence[object]) -> list[Plane]:
    """Return the planes involved in a crash, in the order of ``actors``.

    Only airborne planes count, and only against planes and towers in
    the same screen quarter.
    """
    planes: list[list[Plane]] = [[] for _ in range(4)]
    towers: list[list[Tower]] = [[] for _ in range(4)]
    for actor in actors:
        if isinstance(actor, Plane) and actor.active():
            planes[quadrant(actor.position)].append(actor)
        elif isinstance(actor, Tower):
            towers[quadrant(actor.position)].append(actor)
    crashed: set[int] = set()
    for bucket, shelters in zip(planes, towers):
        for first in bucket:
            for second in bucket:
                if planes_collide(first, second, shelters):
                    crashed.update((id(first), id(second)))
    return [actor for actor in actors if id(actor) in crashed]


def near_landmark(position: Vector) -> bool:
    """Tell whether a crash at ``position`` happened over the landmark."""
    return distance(position, LANDMARK) < LANDMARK_RADIUS