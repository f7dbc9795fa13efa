"""Reading traffic scripts: one plane (``A``) or tower (``T``) per line."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Optional, Union

from skyradar.actors import Plane, Tower
from skyradar.numparse import is_numeric, parse_float, parse_int, split_words

_FIELD_COUNTS = {"A": 7, "T": 4}


class ScriptError(ValueError):
    """A traffic script could not be read or holds an invalid line."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def parse_line(line: str) -> Optional[Union[Plane, Tower]]:
    """Turn one script line into an actor; a bare newline gives None."""
    if line == "\n":
        return None
    words = split_words(line)
    if not words:
        raise ScriptError("empty entry")
    kind = words[0]
    expected = _FIELD_COUNTS.get(kind)
    if expected is None:
        raise ScriptError(f"unknown entry type {kind!r}")
    if len(words) != expected:
        raise ScriptError(f"entry {kind!r} needs {expected - 1} values")
    if not all(is_numeric(word) for word in words[1:]):
        raise ScriptError(f"entry {kind!r} holds a non-numeric value")
    values = words[1:]
    if kind == "A":
        return Plane(
            (float(parse_int(values[0])), float(parse_int(values[1]))),
            (float(parse_int(values[2])), float(parse_int(values[3]))),
            float(parse_int(values[4])),
            parse_float(values[5]),
        )
    return Tower(
        (float(parse_int(values[0])), float(parse_int(values[1]))),
        float(parse_int(values[2])),
    )


def read_script(lines: Iterable[str]) -> list[Union[Plane, Tower]]:
    """Parse every line, in order, stopping at the first invalid one."""
    actors = []
    for number, line in enumerate(lines, start=1):
        try:
            actor = parse_line(line)
        except ScriptError as error:
            raise ScriptError(str(error), number) from None
        if actor is not None:
            actors.append(actor)
    return actors


def load_script(path: Union[str, os.PathLike]) -> list[Union[Plane, Tower]]:
    """Read the traffic script stored at ``path``."""
    try:
        with open(path, encoding="utf-8") as source:
            return read_script(source)
    except OSError as error:
        raise ScriptError(f"cannot read {os.fspath(path)}: {error.strerror}") from error