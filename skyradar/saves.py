"""Persisting statistics and earned medals between sessions."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Union

from skyradar.numparse import format_int, parse_int
from skyradar.progress import Medal, Stats

PathLike = Union[str, os.PathLike]


def load_save(path: PathLike, stats: Stats, medals: Sequence[Medal]) -> bool:
    """Restore ``stats`` and medals from ``path``.

    The first three lines hold kilometres, launches and crashes; every
    later line checks the medals whose name it starts with. Returns False,
    leaving everything untouched, when the file cannot be opened.
    """
    try:
        with open(path, encoding="utf-8") as source:
            lines = source.readlines()
    except OSError:
        return False
    for number, line in enumerate(lines):
        if number == 0:
            stats.km_flights = parse_int(line)
        elif number == 1:
            stats.planes_launched = parse_int(line)
        elif number == 2:
            stats.planes_crashed = parse_int(line)
        else:
            for medal in medals:
                if line.startswith(medal.name):
                    medal.checked = True
    return True


def write_save(path: PathLike, stats: Stats, medals: Sequence[Medal]) -> None:
    """Write ``stats`` and the names of checked medals to ``path``."""
    counters = (
        stats.km_flights,
        stats.planes_launched,
        stats.planes_crashed,
        stats.planes_landed,
    )
    lines = [format_int(value) for value in counters]
    lines.extend(medal.name for medal in medals if medal.checked)
    with open(path, "w", encoding="utf-8") as target:
        target.writelines(f"{line}\n" for line in lines)