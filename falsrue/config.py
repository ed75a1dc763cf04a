"""Reader for simple ``[section]`` / ``key = value`` configuration files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

_SPACES = " \t"
_C_SPACES = " \t\n\v\f\r"
_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedLine:
    """One accepted line: a section header, or a key with its value."""

    section: Optional[str] = None
    key: str = ""
    value: str = ""


def _trim(text: str) -> str:
    return text.strip(_SPACES)


def _substr(text: str, start: int, count: int) -> str:
    """Take ``count`` characters from ``start``; a negative count takes the rest."""
    if start > len(text):
        raise IndexError("substring start past end of line")
    if count < 0:
        return text[start:]
    return text[start:start + count]


def _drop_first(value: str, char: str) -> str:
    pos = value.find(char)
    if pos > 0:
        return value[:pos] + value[pos + 1:]
    return value


def parse_line(line: str) -> Optional[ParsedLine]:
    """Parse one line, returning ``None`` for lines that carry nothing."""
    if not line:
        return None
    end = len(line) - 1
    hash_pos = line.find("#")
    if hash_pos == 0:
        return None
    if hash_pos > 0:
        end = hash_pos - 1

    open_pos = line.find("[")
    close_pos = line.find("]")
    if open_pos != -1 and close_pos != -1:
        return ParsedLine(section=_substr(line, open_pos + 1, close_pos - 1))

    body = _substr(line, 0, 1 - end)
    eq = body.find("=")
    if eq == -1:
        return None
    key = _trim(body[:eq])
    if not key:
        return None
    value = _trim(_substr(body, eq + 1, end - eq))
    value = _drop_first(value, "\r")
    value = _drop_first(value, "\n")
    return ParsedLine(key=key, value=value)


def _lines(text: str) -> Iterator[str]:
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    yield from pieces


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text.lstrip(_C_SPACES))
    return int(match.group()) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text.lstrip(_C_SPACES))
    return float(match.group()) if match else 0.0


class Config:
    """Settings grouped by section, loaded from a configuration file."""

    def __init__(self) -> None:
        self._settings: dict[str, dict[str, str]] = {}

    def read(self, filename: Union[str, os.PathLike]) -> None:
        """Load ``filename``, replacing all current settings.

        Raises ``OSError`` when the file cannot be opened.
        """
        self._settings.clear()
        with open(filename, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()

        section = ""
        current: dict[str, str] = {}
        for line in _lines(text):
            parsed = parse_line(line)
            if parsed is None:
                continue
            if parsed.section is not None:
                section = parsed.section
            if section in self._settings:
                current[parsed.key] = parsed.value
                self._settings[section] = dict(current)
            else:
                current = {}
                self._settings[section] = {}

    def _lookup(self, section: str, item: str) -> Optional[str]:
        return self._settings.get(section, {}).get(item)

    def read_string(self, section: str, item: str, default: str) -> str:
        """Return the raw value, or ``default`` when it is missing."""
        value = self._lookup(section, item)
        return default if value is None else value

    def read_int(self, section: str, item: str, default: int) -> int:
        """Return the leading integer of the value, or ``default`` when missing."""
        value = self._lookup(section, item)
        return default if value is None else _atoi(value)

    def read_float(self, section: str, item: str, default: float) -> float:
        """Return the leading number of the value, or ``default`` when missing."""
        value = self._lookup(section, item)
        return default if value is None else _atof(value)