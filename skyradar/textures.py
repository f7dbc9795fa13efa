"""Picture files used by the radar and their loading."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

PICTURES_DIR = "assets/pictures/"

T = TypeVar("T")

_TEXTURE_TABLE: tuple[tuple[str, str], ...] = (
    ("pass", "pass.png"),
    ("world", "worldmap2.jpg"),
    ("menu_1", "menu.png"),
    ("plane_1", "plane_base.png"),
    ("plane_2", "b2.png"),
    ("yohann", "yohann_.png"),
    ("tower_1", "tower.png"),
    ("plane_3", "plane_3.png"),
    ("plane_4", "zeppelin.png"),
    ("plane_5", "V2.png"),
    ("plane_6", "starship.png"),
    ("plane_7", "biplan.png"),
    ("plane_8", "mirage.png"),
    ("plane_9", "tigre.png"),
    ("plane_10", "monster.png"),
    ("plane_11", "shrek.png"),
    ("plane_12", "lollipop.png"),
    ("plane_13", "eliott.png"),
    ("plane_14", "ladybug.png"),
    ("plane_15", "ovni.png"),
    ("plane_16", "buzz.png"),
    ("plane_17", "destroyer.png"),
    ("plane_18", "blackcat.png"),
)

TEXTURE_FILES: dict[str, str] = dict(_TEXTURE_TABLE)


def texture_path(name: str) -> str:
    """Path of the picture behind the texture called ``name``."""
    try:
        return PICTURES_DIR + TEXTURE_FILES[name]
    except KeyError:
        raise KeyError(f"unknown texture {name!r}") from None


def load_textures(loader: Callable[[str], T]) -> dict[str, T]:
    """Load every texture with ``loader``, which receives its file path."""
    return {name: loader(texture_path(name)) for name in TEXTURE_FILES}