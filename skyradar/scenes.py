"""Menu, medal list and pilot pass: layout and scrolling rules."""

from __future__ import annotations

import enum
from typing import Optional, Union

from skyradar.geometry import HEIGHT

QUIT = "quit"

MEDAL_ROW_HEIGHT = 140
SKIN_COLUMN_WIDTH = 300
VISIBLE_SKINS = 6


class SceneId(enum.IntEnum):
    """The scenes the game can show."""

    TRAFFIC = 0
    MENU = 1
    MEDALS = 2
    PILOT = 3


# (right edge, top, bottom, action, highlight top); all buttons start at x=1430.
_BUTTONS_LEFT = 1430
_HIGHLIGHT_LEFT = 1420
_BUTTONS: tuple[tuple[int, int, int, Optional[Union[SceneId, str]], int], ...] = (
    (1720, 265, 310, SceneId.TRAFFIC, 255),
    (1770, 415, 452, SceneId.PILOT, 405),
    (1700, 560, 600, SceneId.MEDALS, 550),
    (1730, 706, 744, None, 696),
    (1600, 852, 894, QUIT, 842),
)


def _button_at(x: float, y: float):
    for button in _BUTTONS:
        right, top, bottom = button[:3]
        if _BUTTONS_LEFT < x < right and top < y < bottom:
            return button
    return None


def menu_target(x: float, y: float) -> Optional[Union[SceneId, str]]:
    """What a click at ``(x, y)`` on the menu does.

    Returns the scene to switch to, ``QUIT`` to close the window, or None.
    """
    button = _button_at(x, y)
    return None if button is None else button[3]


def menu_highlight(x: float, y: float) -> Optional[tuple[int, int]]:
    """Top-left corner of the highlight under the mouse, or None."""
    button = _button_at(x, y)
    return None if button is None else (_HIGHLIGHT_LEFT, button[4])


def medal_list_height(count: int) -> int:
    """Total height in pixels of a list of ``count`` medals."""
    return 10 + MEDAL_ROW_HEIGHT * count


def scroll_medals(offset: int, delta: float, medal_count: int) -> int:
    """New offset of the medal list after a wheel move of ``delta``."""
    step = delta * 10
    if step > 0 and offset + step <= 0:
        return int(offset + step)
    if step < 0 and offset + step + medal_list_height(medal_count) > HEIGHT:
        return int(offset + step)
    return offset


def scroll_pilot(offset: int, delta: float, skin_count: int) -> int:
    """New offset of the pilot pass after a wheel move of ``delta``.

    The pass moves one skin column at a time.
    """
    step = delta * 10
    length = SKIN_COLUMN_WIDTH * skin_count - 1
    if step < 0 and offset - SKIN_COLUMN_WIDTH + length >= VISIBLE_SKINS * SKIN_COLUMN_WIDTH:
        return offset - SKIN_COLUMN_WIDTH
    if step > 0 and offset + SKIN_COLUMN_WIDTH <= 0:
        return offset + SKIN_COLUMN_WIDTH
    return offset