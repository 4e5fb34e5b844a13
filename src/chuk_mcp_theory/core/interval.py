"""
Interval primitives - IntervalName, IntervalQuality and interval().

Intervals are named semitone distances. Applying an interval to a note
moves it up (direction=1) or down (direction=-1) by that many semitones.

    interval(Note("C4"), IntervalName.P5)      -> G4
    interval(Note("C4"), IntervalName.M3, -1)  -> Ab3
    interval(Note("C4"), -13)                  -> B2
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.errors import UnknownInterval

if TYPE_CHECKING:
    from chuk_mcp_theory.core.note import Note


class IntervalQuality(str, Enum):
    """Quality family of a named interval."""

    PERFECT = "perfect"
    MINOR = "minor"
    MAJOR = "major"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"


class IntervalName(str, Enum):
    """
    Named intervals, by short name.

    The first character is the quality (P, m, M, d, A) and the
    number is the diatonic size. Compound intervals (9ths and up)
    span more than an octave.
    """

    # Perfect
    P1 = "P1"
    P4 = "P4"
    P5 = "P5"
    P8 = "P8"
    P11 = "P11"
    P12 = "P12"
    # Minor
    m2 = "m2"
    m3 = "m3"
    m6 = "m6"
    m7 = "m7"
    m9 = "m9"
    m10 = "m10"
    # Major
    M2 = "M2"
    M3 = "M3"
    M6 = "M6"
    M7 = "M7"
    M9 = "M9"
    M10 = "M10"
    # Diminished
    d4 = "d4"
    d5 = "d5"
    d7 = "d7"
    d8 = "d8"
    # Augmented
    A2 = "A2"
    A4 = "A4"
    A5 = "A5"

    @property
    def semitones(self) -> int:
        """Size of the interval in semitones."""
        return INTERVAL_TABLE[self]

    @property
    def quality(self) -> IntervalQuality:
        """Quality family (perfect, minor, major, diminished, augmented)."""
        return _QUALITY_PREFIXES[self.value[0]]

    @classmethod
    def parse(cls, name: str | IntervalName) -> IntervalName:
        """
        Parse an interval from its short name ('P5', 'm3') or member name.

        Quality letters are case-sensitive ('m3' is not 'M3').
        """
        if isinstance(name, cls):
            return name
        text = str(name).strip()
        try:
            return cls(text)
        except ValueError:
            pass
        member = _LONG_NAMES.get(text.lower().replace(" ", "_"))
        if member is not None:
            return member
        raise UnknownInterval(str(name))


_QUALITY_PREFIXES: dict[str, IntervalQuality] = {
    "P": IntervalQuality.PERFECT,
    "m": IntervalQuality.MINOR,
    "M": IntervalQuality.MAJOR,
    "d": IntervalQuality.DIMINISHED,
    "A": IntervalQuality.AUGMENTED,
}

INTERVAL_TABLE: Mapping[IntervalName, int] = MappingProxyType(
    {
        IntervalName.P1: 0,
        IntervalName.P4: 5,
        IntervalName.P5: 7,
        IntervalName.P8: 12,
        IntervalName.P11: 17,
        IntervalName.P12: 19,
        IntervalName.m2: 1,
        IntervalName.m3: 3,
        IntervalName.m6: 8,
        IntervalName.m7: 10,
        IntervalName.m9: 13,
        IntervalName.m10: 15,
        IntervalName.M2: 2,
        IntervalName.M3: 4,
        IntervalName.M6: 9,
        IntervalName.M7: 11,
        IntervalName.M9: 14,
        IntervalName.M10: 16,
        IntervalName.d4: 4,
        IntervalName.d5: 6,
        IntervalName.d7: 9,
        IntervalName.d8: 11,
        IntervalName.A2: 3,
        IntervalName.A4: 6,
        IntervalName.A5: 8,
    }
)

_LONG_NAMES: dict[str, IntervalName] = {
    "unison": IntervalName.P1,
    "minor_second": IntervalName.m2,
    "major_second": IntervalName.M2,
    "minor_third": IntervalName.m3,
    "major_third": IntervalName.M3,
    "perfect_fourth": IntervalName.P4,
    "tritone": IntervalName.d5,
    "perfect_fifth": IntervalName.P5,
    "minor_sixth": IntervalName.m6,
    "major_sixth": IntervalName.M6,
    "minor_seventh": IntervalName.m7,
    "major_seventh": IntervalName.M7,
    "octave": IntervalName.P8,
}

# Preferred spelling for each distance when naming the gap between two notes
_CANONICAL_BY_SEMITONES: dict[int, IntervalName] = {
    semitones: name
    for name, semitones in INTERVAL_TABLE.items()
    if name.quality not in (IntervalQuality.DIMINISHED, IntervalQuality.AUGMENTED)
}
_CANONICAL_BY_SEMITONES[6] = IntervalName.d5


def interval_offset(value: IntervalName | str | int, direction: int = 1) -> int:
    """
    Signed semitone offset for an interval.

    Args:
        value: Interval name, short name string, or raw semitone count
        direction: 1 for up, -1 for down

    Returns:
        Signed semitone offset
    """
    if direction not in (1, -1):
        raise ValueError(ErrorMessages.INVALID_DIRECTION.format(direction=direction))
    if isinstance(value, bool):
        raise TypeError("Interval must be a name or an int, got bool")
    if isinstance(value, int):
        return direction * value
    return direction * IntervalName.parse(value).semitones


def interval(note: Note, value: IntervalName | str | int, direction: int = 1) -> Note:
    """
    Get the note at an interval above or below another note.

    Args:
        note: Starting note
        value: Interval name (IntervalName or 'P5') or semitone count (any sign)
        direction: 1 for up, -1 for down

    Returns:
        New Note with the starting note's notation preference

    Raises:
        PitchOutOfRange: If the result leaves [0, 127]
        UnknownInterval: If an interval name is not recognised
    """
    return note.transpose(interval_offset(value, direction))


def interval_between(lower: Note, upper: Note) -> IntervalName | None:
    """
    Name the ascending interval from one note to another.

    Returns None when the notes are further apart than the largest named
    interval or when upper is below lower.
    """
    distance = lower.distance_to(upper)
    if distance < 0:
        return None
    return _CANONICAL_BY_SEMITONES.get(distance)
