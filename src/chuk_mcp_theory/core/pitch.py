"""
Pitch primitives - PitchClass and pitch index conversion.

A pitch index is a MIDI note number in [0, 127] (69 = A4 = 440 Hz).
This module converts between note names like "Db5" and pitch indices:

    parse_note_name("Db5")      -> ParsedNoteName("D", "b", 5)
    to_index(parsed)            -> 73
    to_name(73, FLAT)           -> "Db5"

Spelling is a display concern: the index is the identity, the
NotationPreference only picks between "C#" and "Db".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_theory.constants import (
    DEFAULT_OCTAVE,
    MIDI_MAX,
    MIDI_MIN,
    REFERENCE_INDEX,
    SEMITONES_PER_OCTAVE,
    NotationPreference,
)
from chuk_mcp_theory.core.errors import MalformedNoteName, PitchOutOfRange

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Semitones from A within the same octave number
_LETTER_OFFSETS: dict[str, int] = {
    "C": -9,
    "D": -7,
    "E": -5,
    "F": -4,
    "G": -2,
    "A": 0,
    "B": 2,
}

_ACCIDENTAL_OFFSETS: dict[str, int] = {"": 0, "#": 1, "b": -1}

_NOTE_PATTERN = re.compile(r"([A-Ga-g])([#b]?)(-1|[0-9])?")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @property
    def is_natural(self) -> bool:
        """True for the seven white-key pitch classes."""
        return len(_SHARP_NAMES[self.value]) == 1

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def to_index(self, octave: int = DEFAULT_OCTAVE) -> int:
        """Pitch index of this class in an octave. C4 = 60."""
        return validate_index(self.value + (octave + 1) * SEMITONES_PER_OCTAVE)

    def spell(self, preference: NotationPreference = NotationPreference.NATURAL) -> str:
        """Get human-readable name."""
        names = _SHARP_NAMES if preference == NotationPreference.SHARP else _FLAT_NAMES
        return names[self.value]

    @classmethod
    def from_index(cls, index: int) -> PitchClass:
        """Extract pitch class from a pitch index."""
        return cls(index % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a key name like 'C', 'C#', 'Db', 'Cb'.

        Any octave in the name is ignored.
        """
        parsed = parse_note_name(name)
        value = _LETTER_OFFSETS[parsed.letter] + parsed.accidental_offset + REFERENCE_INDEX
        return cls(value % SEMITONES_PER_OCTAVE)


@dataclass(frozen=True)
class ParsedNoteName:
    """
    Structured form of a note name.

    letter is upper-cased A-G, accidental is "", "#" or "b",
    octave is -1..9.
    """

    letter: str
    accidental: str = ""
    octave: int = DEFAULT_OCTAVE

    @property
    def accidental_offset(self) -> int:
        """Semitone adjustment of the accidental (-1, 0, +1)."""
        return _ACCIDENTAL_OFFSETS[self.accidental]

    def __str__(self) -> str:
        return f"{self.letter}{self.accidental}{self.octave}"


def validate_index(index: int) -> int:
    """
    Check that a value is a valid pitch index.

    Args:
        index: Candidate MIDI note number

    Returns:
        The index, unchanged

    Raises:
        TypeError: If index is not an integer
        PitchOutOfRange: If index is outside [0, 127]
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Pitch index must be an int, got {type(index).__name__}")
    if not MIDI_MIN <= index <= MIDI_MAX:
        raise PitchOutOfRange(index)
    return index


def parse_note_name(text: str) -> ParsedNoteName:
    """
    Parse a note name like 'C', 'f#3', 'Bb-1'.

    The whole text must match; surrounding whitespace is rejected.

    Grammar: [A-Ga-g][#b]?(-1|[0-9])?  - the octave defaults to 4.

    Args:
        text: Note name

    Returns:
        ParsedNoteName

    Raises:
        MalformedNoteName: If the text does not match the grammar
    """
    if not isinstance(text, str):
        raise MalformedNoteName(repr(text))

    match = _NOTE_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedNoteName(text)

    letter, accidental, octave = match.groups()
    return ParsedNoteName(
        letter=letter.upper(),
        accidental=accidental,
        octave=int(octave) if octave is not None else DEFAULT_OCTAVE,
    )


def to_index(parsed: ParsedNoteName) -> int:
    """
    Compute the pitch index of a parsed note name.

    index = 69 + letter offset + accidental + (octave - 4) * 12

    Raises:
        MalformedNoteName: If the letter or accidental is not recognised
        PitchOutOfRange: If the result is outside [0, 127] (e.g. 'Cb-1', 'G#9')
    """
    if parsed.letter not in _LETTER_OFFSETS or parsed.accidental not in _ACCIDENTAL_OFFSETS:
        raise MalformedNoteName(str(parsed))

    index = (
        REFERENCE_INDEX
        + _LETTER_OFFSETS[parsed.letter]
        + parsed.accidental_offset
        + (parsed.octave - DEFAULT_OCTAVE) * SEMITONES_PER_OCTAVE
    )
    if not MIDI_MIN <= index <= MIDI_MAX:
        raise PitchOutOfRange(index)
    return index


def name_to_index(text: str) -> int:
    """Parse a note name and return its pitch index."""
    return to_index(parse_note_name(text))


def to_name(
    index: int,
    preference: NotationPreference = NotationPreference.NATURAL,
    include_octave: bool = True,
) -> str:
    """
    Render a pitch index as a note name.

    Args:
        index: Pitch index [0, 127]
        preference: Sharp or flat spelling for black keys (NATURAL renders flats)
        include_octave: Append the octave number (e.g. "Db5" vs "Db")

    Returns:
        Note name
    """
    validate_index(index)
    key = PitchClass.from_index(index).spell(preference)
    if not include_octave:
        return key
    return f"{key}{index // SEMITONES_PER_OCTAVE - 1}"
