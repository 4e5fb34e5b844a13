"""
Chord primitives - ChordQuality, chord construction and inversion.

Chords are offset tables from a root, like scales:

    Dom7 = (0, 4, 7, 10)

A chord can be built from a root Note and a quality, or from a chord
name such as "Cmaj7/E", where the part after the slash names the bass
note (figured bass) and selects the inversion.

An inversion moves the lowest note up an octave and to the top, once
per step. Inverting a chord by its own size raises every note by one
octave and keeps the original order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from chuk_mcp_theory.constants import (
    DEFAULT_CHORD_OCTAVE,
    MIDI_MAX,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
    NotationPreference,
)
from chuk_mcp_theory.core.errors import BassNotInChord, MalformedNoteName, UnknownChordQuality
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.pitch import PitchClass

if TYPE_CHECKING:
    from chuk_mcp_theory.models.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


class ChordQuality(str, Enum):
    """
    Built-in chord qualities.

    Values are the tokens used in chord names ("CMaj7", "Dmin", "G7").
    """

    MAJOR = "Maj"
    MINOR = "min"
    DIMINISHED = "Dim"
    AUGMENTED = "Aug"
    MAJOR_7 = "Maj7"
    MINOR_7 = "min7"
    DOMINANT_7 = "Dom7"
    SUS2 = "sus2"
    SUS4 = "sus4"
    DOMINANT_9 = "Dom9"
    MAJOR_11 = "Maj11"
    DIMINISHED_7 = "Dim7"
    HALF_DIMINISHED_7 = "min7b5"

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitone offsets from the root."""
        return CHORD_TABLE[self]

    @classmethod
    def parse(cls, token: str | ChordQuality) -> ChordQuality:
        """
        Parse a quality token.

        Short forms are case-sensitive ("m" is minor, "M" is major);
        full tokens are not ("maj7" == "Maj7").

        Raises:
            UnknownChordQuality: If the token is not recognised
        """
        if isinstance(token, cls):
            return token
        text = str(token).strip()
        if text in _QUALITY_ALIASES:
            return _QUALITY_ALIASES[text]
        for member in cls:
            if text.lower() == member.value.lower():
                return member
        raise UnknownChordQuality(text)


CHORD_TABLE: Mapping[ChordQuality, tuple[int, ...]] = MappingProxyType(
    {
        ChordQuality.MAJOR: (0, 4, 7),
        ChordQuality.MINOR: (0, 3, 7),
        ChordQuality.DIMINISHED: (0, 3, 6),
        ChordQuality.AUGMENTED: (0, 4, 8),
        ChordQuality.MAJOR_7: (0, 4, 7, 11),
        ChordQuality.MINOR_7: (0, 3, 7, 10),
        ChordQuality.DOMINANT_7: (0, 4, 7, 10),
        ChordQuality.SUS2: (0, 2, 7),
        ChordQuality.SUS4: (0, 5, 7),
        ChordQuality.DOMINANT_9: (0, 4, 7, 10, 14),
        ChordQuality.MAJOR_11: (0, 4, 7, 11, 14, 17),
        ChordQuality.DIMINISHED_7: (0, 3, 6, 9),
        ChordQuality.HALF_DIMINISHED_7: (0, 3, 6, 10),
    }
)

_QUALITY_ALIASES: dict[str, ChordQuality] = {
    "": ChordQuality.MAJOR,
    "M": ChordQuality.MAJOR,
    "m": ChordQuality.MINOR,
    "-": ChordQuality.MINOR,
    "°": ChordQuality.DIMINISHED,
    "+": ChordQuality.AUGMENTED,
    "M7": ChordQuality.MAJOR_7,
    "Δ7": ChordQuality.MAJOR_7,
    "m7": ChordQuality.MINOR_7,
    "7": ChordQuality.DOMINANT_7,
    "9": ChordQuality.DOMINANT_9,
    "M11": ChordQuality.MAJOR_11,
    "°7": ChordQuality.DIMINISHED_7,
    "ø7": ChordQuality.HALF_DIMINISHED_7,
    "m7b5": ChordQuality.HALF_DIMINISHED_7,
}

_ROOT_PATTERN = re.compile(r"([A-Ga-g])([#b]?)(.*)")
_BASS_PATTERN = re.compile(r"([A-Ga-g])([#b]?)")


def resolve_quality(
    token: ChordQuality | str, vocabulary: Vocabulary | None = None
) -> ChordQuality | str:
    """
    Resolve a quality token to a built-in quality or a vocabulary token.

    Raises:
        UnknownChordQuality: If the token is in neither
    """
    try:
        return ChordQuality.parse(token)
    except UnknownChordQuality:
        if vocabulary is not None and vocabulary.chord_offsets(str(token)) is not None:
            return str(token).strip()
        raise


def quality_offsets(
    quality: ChordQuality | str, vocabulary: Vocabulary | None = None
) -> tuple[int, ...]:
    """Offset table for a quality token (built-in or vocabulary)."""
    resolved = resolve_quality(quality, vocabulary)
    if isinstance(resolved, ChordQuality):
        return resolved.offsets
    offsets = vocabulary.chord_offsets(resolved) if vocabulary is not None else None
    if offsets is None:
        raise UnknownChordQuality(str(quality))
    return offsets


def quality_label(quality: ChordQuality | str) -> str:
    """Token used when naming a chord."""
    return quality.value if isinstance(quality, ChordQuality) else quality


@dataclass(frozen=True)
class ParsedChordName:
    """
    Structured form of a chord name.

    root and bass are key names ("C", "F#", "Bb"); bass is None
    for chords without a slash.
    """

    root: str
    quality: ChordQuality | str
    bass: str | None = None

    @property
    def root_pitch_class(self) -> PitchClass:
        return PitchClass.parse(self.root)

    @property
    def bass_pitch_class(self) -> PitchClass | None:
        return PitchClass.parse(self.bass) if self.bass else None

    def __str__(self) -> str:
        name = f"{self.root}{quality_label(self.quality)}"
        if self.bass:
            name += f"/{self.bass}"
        return name


def parse_chord_name(text: str, vocabulary: Vocabulary | None = None) -> ParsedChordName:
    """
    Parse a chord name like 'C', 'Ebmin7', 'Cmaj7/E', 'F#sus4'.

    Grammar: [A-G][#b]?<quality>(/[A-G][#b]?)?  - an empty quality is major.

    Raises:
        MalformedNoteName: If the root or bass is not a note letter
        UnknownChordQuality: If the quality token is not recognised
    """
    if not isinstance(text, str):
        raise MalformedNoteName(repr(text))

    head, slash, bass_text = text.strip().partition("/")

    match = _ROOT_PATTERN.fullmatch(head)
    if match is None:
        raise MalformedNoteName(text)
    letter, accidental, token = match.groups()

    bass = None
    if slash:
        bass_match = _BASS_PATTERN.fullmatch(bass_text.strip())
        if bass_match is None:
            raise MalformedNoteName(bass_text)
        bass = bass_match.group(1).upper() + bass_match.group(2)

    return ParsedChordName(
        root=letter.upper() + accidental,
        quality=resolve_quality(token, vocabulary),
        bass=bass,
    )


def drop_chord(notes: Sequence[Note], octaves: int = 1) -> list[Note]:
    """
    Lower every note of a chord by a number of octaves.

    Raises:
        PitchOutOfRange: If any note would fall below 0
    """
    return [note.transpose(-octaves * SEMITONES_PER_OCTAVE) for note in notes]


def invert_chord(notes: Sequence[Note], inversion: int = 0) -> list[Note]:
    """
    Invert a chord.

    Each step raises the lowest-positioned note by an octave and moves it
    to the end. If that would push it above 127, the whole chord is
    first dropped an octave (voicing is relative, not absolute).

    Args:
        notes: Chord notes in voicing order
        inversion: Number of inversion steps (may exceed the chord size)

    Returns:
        New list of notes; the input is not modified
    """
    if inversion < 0:
        raise ValueError(ErrorMessages.NEGATIVE_INVERSION.format(inversion=inversion))

    voiced = [note.copy() for note in notes]
    if not voiced:
        return voiced

    for _ in range(inversion):
        lowest = voiced[0]
        if lowest.index + SEMITONES_PER_OCTAVE > MIDI_MAX:
            logger.debug("Dropping chord an octave to invert %s", lowest.name())
            voiced = drop_chord(voiced)
            lowest = voiced[0]
        voiced = voiced[1:] + [lowest.transpose(SEMITONES_PER_OCTAVE)]
    return voiced


def build_chord(
    root: Note,
    quality: ChordQuality | str,
    inversion: int = 0,
    vocabulary: Vocabulary | None = None,
) -> list[Note]:
    """
    Build a chord on a root note.

    Args:
        root: Chord root
        quality: Chord quality or quality token ("Dom7", "m7", ...)
        inversion: Inversion to apply (0 = root position)
        vocabulary: Extra chord definitions

    Returns:
        Chord notes, ascending before inversion, spelled with the
        root's preference

    Raises:
        UnknownChordQuality: If the quality is not known
        PitchOutOfRange: If a chord tone falls outside [0, 127]
    """
    offsets = quality_offsets(quality, vocabulary)
    notes = [root.transpose(offset) for offset in offsets]
    return invert_chord(notes, inversion)


def chord_from_name(
    name: str,
    octave: int = DEFAULT_CHORD_OCTAVE,
    inversion: int = 0,
    vocabulary: Vocabulary | None = None,
) -> list[Note]:
    """
    Build a chord from its name.

    The root is voiced in the given octave. A '/bass' suffix inverts the
    chord until that pitch class is the lowest note, so 'Cmaj7/E' at
    octave 3 gives E3 G3 B3 C4.

    Args:
        name: Chord name, e.g. 'Dmin7', 'Cmaj7/E'
        octave: Octave of the root
        inversion: Inversion for chords without a bass suffix

    Raises:
        MalformedNoteName: If the root or bass is malformed
        UnknownChordQuality: If the quality is not known
        BassNotInChord: If the bass pitch class is not a chord tone
        PitchOutOfRange: If the chord does not fit in [0, 127]
    """
    parsed = parse_chord_name(name, vocabulary)
    preference = NotationPreference.SHARP if "#" in parsed.root else NotationPreference.FLAT
    root = Note(parsed.root_pitch_class.to_index(octave), preference)
    notes = build_chord(root, parsed.quality, vocabulary=vocabulary)

    bass = parsed.bass_pitch_class
    if bass is None or bass == parsed.root_pitch_class:
        return invert_chord(notes, inversion)

    if inversion:
        raise ValueError(f"Chord '{name}' names a bass note; inversion must be 0")

    position = next((i for i, note in enumerate(notes) if note.pitch_class() == bass), None)
    if position is None:
        raise BassNotInChord(parsed.bass or "", name)

    logger.debug("Chord %s: figured bass %s selects inversion %d", name, parsed.bass, position)
    return invert_chord(notes, position)


def chord_name(root: Note, quality: ChordQuality | str, bass: Note | None = None) -> str:
    """Name a chord, e.g. chord_name(Note('C4'), ChordQuality.DOMINANT_7) -> 'CDom7'."""
    name = f"{root.key()}{quality_label(quality)}"
    if bass is not None and bass.pitch_class() != root.pitch_class():
        name += f"/{bass.key()}"
    return name
