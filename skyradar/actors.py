"""Things that live on the radar: planes, control towers and backdrops."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from skyradar.geometry import HEIGHT, WIDTH, Vector, direction, distance, scale, wrap

HITBOX_SIZE = 20.0


@dataclass(eq=False)
class Plane:
    """A plane flying in a straight line from its origin towards a target.

    It waits ``delay`` seconds before taking off. Its position wraps
    around the edges of the radar area.
    """

    position: Vector
    target: Vector
    speed: float
    delay: float = 0.0
    name: str = "plane"
    origin: Vector = field(default=(0.0, 0.0), init=False)
    velocity: Vector = field(default=(0.0, 0.0), init=False)
    rotation: float = field(default=0.0, init=False)
    launched: bool = field(default=False, init=False)
    delta_t: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.origin = self.position
        self.velocity = direction(self.position, self.target, self.speed)
        self.rotation = math.degrees(
            math.atan2(
                self.target[1] - self.position[1],
                self.target[0] - self.position[0],
            )
        )

    def advance(self, dt: float) -> bool:
        """Let ``dt`` seconds pass.

        While the delay runs, only the delay shrinks. Afterwards the plane
        moves along its velocity. Returns True on the step it takes off.
        """
        self.delta_t = dt
        if self.delay >= 0:
            self.delay -= dt
            return False
        took_off = not self.launched
        self.launched = True
        dx, dy = scale(self.velocity, dt, dt)
        x, y = self.position
        self.position = (wrap(x + dx, WIDTH), wrap(y + dy, HEIGHT))
        return took_off

    def active(self) -> bool:
        """Tell whether the plane is visible and can collide."""
        return self.delay <= 0

    def hitbox(self) -> tuple[float, float, float, float]:
        """Square around the plane as ``(left, top, width, height)``."""
        half = HITBOX_SIZE / 2
        x, y = self.position
        return (x - half, y - half, HITBOX_SIZE, HITBOX_SIZE)


@dataclass(eq=False)
class Tower:
    """A control tower whose circular area shelters planes from crashes."""

    position: Vector
    area: float
    name: str = "tower"

    def covers(self, point: Vector, margin: float = 0.0) -> bool:
        """Tell whether ``point`` lies within the area widened by ``margin``."""
        return distance(point, self.position) <= self.area + margin


@dataclass(eq=False)
class Backdrop:
    """A static picture drawn behind or over a scene."""

    texture: str
    scale: Vector = (1.0, 1.0)
    position: Vector = (0.0, 0.0)
    name: str = "world"


Actor = Union[Plane, Tower, Backdrop]


def find_actor(actors: Iterable[Actor], name: str) -> Optional[Actor]:
    """Return the first actor called ``name``, or None."""
    return next((actor for actor in actors if actor.name == name), None)