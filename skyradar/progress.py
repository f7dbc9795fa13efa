"""Player statistics, medals and unlockable plane skins."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Optional

KM_PER_LEVEL = 10_000_000
ONE_FOR_ALL = "One for all"


@dataclass
class Stats:
    """Counters kept across sessions."""

    planes_launched: int = 0
    planes_landed: int = 0
    planes_crashed: int = 0
    km_flights: float = 0.0
    pilot_pass_level: int = 0


Checker = Callable[[Stats, Sequence["Medal"]], bool]


@dataclass
class Medal:
    """An achievement; ``checker`` is None for medals granted elsewhere."""

    name: str
    description: str
    checker: Optional[Checker] = field(default=None, repr=False)
    checked: bool = False

    def earned(self, stats: Stats, medals: Sequence[Medal]) -> bool:
        """Tell whether the medal's condition holds now."""
        return self.checker is not None and bool(self.checker(stats, medals))


@dataclass
class Skin:
    """A plane look, identified by the name of its texture."""

    name: str
    texture: str
    unlocked: bool = False


def _km_at_least(limit: float) -> Checker:
    return lambda stats, medals: stats.km_flights >= limit


def _crashed_at_least(limit: int) -> Checker:
    return lambda stats, medals: stats.planes_crashed >= limit


def _landed_at_least(limit: int) -> Checker:
    return lambda stats, medals: stats.planes_landed >= limit


def _all_others(stats: Stats, medals: Sequence[Medal]) -> bool:
    return all(medal.checked for medal in medals if medal.name != ONE_FOR_ALL)


def default_medals() -> list[Medal]:
    """All medals in display order, none of them checked."""
    return [
        Medal("Deja vu", "Krash a plane over NYC"),
        Medal("Sky-lander 3", "Land over 50000 plane", _landed_at_least(50000)),
        Medal("Sky-lander 2", "Land over 1000 plane", _landed_at_least(1000)),
        Medal("Sky-lander", "Land over 200 plane", _landed_at_least(200)),
        Medal(ONE_FOR_ALL, "Have any other medals", _all_others),
        Medal("Petit Geek :)", 'Have the medal "Petit Geek :)"'),
        Medal("Ace", "Crash over 50000 plane", _crashed_at_least(50000)),
        Medal("Oussama", "Crash over 1000 plane", _crashed_at_least(1000)),
        Medal("Ka-boom!", "Crash over 200 plane", _crashed_at_least(200)),
        Medal("A litlle step", "Fly over 500000km", _km_at_least(500000)),
        Medal("Wilco", "Fly over 10000000km", _km_at_least(10000000)),
        Medal("Heavy driver", "Fly over 1000000000km", _km_at_least(1000000000)),
    ]


def award_medals(stats: Stats, medals: Sequence[Medal]) -> list[Medal]:
    """Check every medal newly earned and return those, in list order."""
    gained = []
    for medal in medals:
        if not medal.checked and medal.earned(stats, medals):
            medal.checked = True
            gained.append(medal)
    return gained


def default_skins() -> list[Skin]:
    """All plane skins in pilot-pass order, all locked."""
    return [
        Skin("B2", "plane_2"),
        Skin("ovni", "plane_15"),
        Skin("valheim", "plane_3"),
        Skin("zeppelin", "plane_4"),
        Skin("destroyer", "plane_17"),
        Skin("buzz", "plane_16"),
        Skin("V2", "plane_5"),
        Skin("biplan", "plane_7"),
        Skin("starship", "plane_6"),
        Skin("lollipop", "plane_10"),
        Skin("ladybug", "plane_14"),
        Skin("shrek", "plane_12"),
        Skin("chatnoir", "plane_18"),
        Skin("monster", "plane_11"),
        Skin("mirage", "plane_8"),
        Skin("tigre", "plane_9"),
        Skin("eliott", "plane_13"),
        Skin("bigboss", "yohann"),
        Skin("BASE", "plane_1"),
    ]


def unlock_skins(skins: Sequence[Skin], stats: Stats) -> None:
    """Unlock one skin per pilot-pass level reached; never relocks."""
    progress = stats.km_flights * 300 / KM_PER_LEVEL
    for rank, skin in enumerate(skins, start=1):
        if progress >= 300 * rank:
            skin.unlocked = True


def cycle_skin(
    skins: Sequence[Skin], stats: Stats, index: int, step: int
) -> tuple[int, Optional[Skin]]:
    """Move the selected skin by ``step``, wrapping around.

    Returns the new index and the skin to apply, or None when the skin
    at that index is still locked.
    """
    if not skins:
        return 0, None
    unlock_skins(skins, stats)
    index += step
    if index < 0:
        index = len(skins) - 1
    if index > len(skins) - 1:
        index = 0
    skin = skins[index]
    return index, skin if skin.unlocked else None


def pilot_level(stats: Stats) -> int:
    """Pilot-pass level: whole multiples of the kilometres per level."""
    return int(stats.km_flights / KM_PER_LEVEL)