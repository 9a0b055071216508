"""Satellite identifiers such as ``G15`` or ``C03``."""

from __future__ import annotations

from dataclasses import dataclass

from .strutils import _stoi


@dataclass(frozen=True, order=True)
class SatID:
    """A satellite: one-letter system code and a number within the system.

    Satellites order by system first, then by number.
    """

    system: str = ""
    id: int = -1

    @classmethod
    def parse(cls, text):
        """Build from text such as ``"G15"``.

        The first character is the system and the next two characters are the number.
        Raises ValueError if the text has no number in that position.
        """
        if len(text) < 2:
            raise ValueError(f"invalid satellite identifier: {text!r}")
        return cls(text[:1], _stoi(text[1:3]))

    def __str__(self):
        return f"{self.system}{self.id}"