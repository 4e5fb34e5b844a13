"""
Note - a pitch with a spelling preference.

A Note wraps a pitch index [0, 127] and a NotationPreference. It can be
built from a name, an index, or a (letter, accidental, octave) triple:

    Note("Db5")            -> Db5 (index 73)
    Note(63)               -> Eb4
    Note(("F", "#", 2))    -> F#2

Operations that derive new pitches (transpose, interval, scale, chord)
return new Notes. The set* family re-initializes a Note in place, and
never leaves it half-updated: the new index is computed and validated
before anything is assigned.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING

from chuk_mcp_theory.constants import (
    DEFAULT_OCTAVE,
    MIDI_MAX,
    MIDI_MIN,
    REFERENCE_FREQUENCY,
    REFERENCE_INDEX,
    SEMITONES_PER_OCTAVE,
    NotationPreference,
)
from chuk_mcp_theory.core.errors import MalformedNoteName
from chuk_mcp_theory.core.pitch import (
    ParsedNoteName,
    PitchClass,
    parse_note_name,
    to_index,
    to_name,
    validate_index,
)

if TYPE_CHECKING:
    from chuk_mcp_theory.core.chord import ChordQuality
    from chuk_mcp_theory.core.interval import IntervalName
    from chuk_mcp_theory.core.scale import ScaleKind

NoteParts = tuple[str, str, int]
NoteInput = str | int | NoteParts

_NATURAL_ACCIDENTALS = (None, "", "n")


def _resolve(
    value: NoteInput, preference: NotationPreference | str | None, default: NotationPreference
) -> tuple[int, NotationPreference]:
    """Compute (index, preference) for any accepted note input, without side effects."""
    pref = NotationPreference.parse(preference)

    if isinstance(value, bool):
        raise TypeError("Note value must be a name, an index or a (letter, accidental, octave)")

    if isinstance(value, int):
        index = validate_index(value)
        return index, default if pref == NotationPreference.NATURAL else pref

    if isinstance(value, str):
        parsed = parse_note_name(value)
    elif isinstance(value, tuple):
        parsed = _parts_to_parsed(*value)
    else:
        raise TypeError(f"Cannot build a Note from {type(value).__name__}")

    index = to_index(parsed)
    if pref == NotationPreference.NATURAL:
        # Spelling follows the name: "C#" keeps sharps, anything else flats
        pref = NotationPreference.SHARP if parsed.accidental == "#" else NotationPreference.FLAT
    return index, pref


def _parts_to_parsed(
    letter: str, accidental: str | None = "", octave: int = DEFAULT_OCTAVE
) -> ParsedNoteName:
    if accidental in _NATURAL_ACCIDENTALS:
        accidental = ""
    if not isinstance(letter, str) or len(letter) != 1 or letter.upper() not in "ABCDEFG":
        raise MalformedNoteName(f"{letter}{accidental}{octave}")
    if accidental not in ("", "#", "b"):
        raise MalformedNoteName(f"{letter}{accidental}{octave}")
    if isinstance(octave, bool) or not isinstance(octave, int):
        raise MalformedNoteName(f"{letter}{accidental}{octave}")
    return ParsedNoteName(letter.upper(), accidental, octave)


@total_ordering
class Note:
    """
    A musical pitch: index [0, 127] plus notation preference.

    Two notes are equal when they are the same pitch; the spelling
    preference does not take part in comparisons (C#4 == Db4).
    """

    __slots__ = ("index", "preference")
    index: int
    preference: NotationPreference

    def __init__(
        self,
        value: NoteInput = "A4",
        preference: NotationPreference | str | None = None,
    ) -> None:
        """
        Create a note.

        Args:
            value: Name ("Db5"), index (0-127) or (letter, accidental, octave)
            preference: Sharp/flat spelling; unspecified follows the name,
                or flats for numeric input

        Raises:
            MalformedNoteName: If a name or triple is not a valid note
            PitchOutOfRange: If the pitch falls outside [0, 127]
        """
        self.index, self.preference = _resolve(value, preference, NotationPreference.FLAT)

    @classmethod
    def from_name(cls, name: str, preference: NotationPreference | str | None = None) -> Note:
        """Create a note from a name like 'Db5'."""
        if not isinstance(name, str):
            raise MalformedNoteName(repr(name))
        return cls(name, preference)

    @classmethod
    def from_index(cls, index: int, preference: NotationPreference | str | None = None) -> Note:
        """Create a note from a pitch index."""
        return cls(validate_index(index), preference)

    @classmethod
    def from_parts(
        cls,
        letter: str,
        accidental: str | None = "",
        octave: int = DEFAULT_OCTAVE,
        preference: NotationPreference | str | None = None,
    ) -> Note:
        """Create a note from a letter, accidental ('#', 'b', '' or 'n') and octave."""
        return cls((letter, accidental, octave), preference)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Descriptors
    # ------------------------------------------------------------------

    def name(self) -> str:
        """Full note name, e.g. 'Db6'."""
        return to_name(self.index, self.preference)

    def key(self) -> str:
        """Note name without octave, e.g. 'Db'."""
        return to_name(self.index, self.preference, include_octave=False)

    def midi(self) -> int:
        """Pitch index (MIDI note number)."""
        return self.index

    midi_index = midi

    def octave(self) -> int:
        """Octave number, -1..9."""
        return self.index // SEMITONES_PER_OCTAVE - 1

    def pitch_class(self) -> PitchClass:
        """Octave-independent pitch class."""
        return PitchClass.from_index(self.index)

    def frequency(self, reference: float = REFERENCE_FREQUENCY) -> float:
        """
        Frequency in Hz, equal temperament relative to A4.

        Args:
            reference: Frequency of A4 (default 440.0)
        """
        return reference * 2.0 ** ((self.index - REFERENCE_INDEX) / SEMITONES_PER_OCTAVE)

    def distance_to(self, other: Note) -> int:
        """Signed semitones to another note (positive when other is higher)."""
        return other.index - self.index

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def set(self, value: NoteInput, preference: NotationPreference | str | None = None) -> None:
        """
        Re-initialize this note from a name, index or triple.

        Raises the same errors as the constructor. On failure the note
        is left unchanged.
        """
        index, pref = _resolve(value, preference, self.preference)
        self.index, self.preference = index, pref

    def set_octave(self, octave: int = DEFAULT_OCTAVE) -> bool:
        """
        Move to another octave, keeping the pitch class.

        Returns:
            True on success, False (note unchanged) if the result would
            be outside [0, 127]
        """
        new_index = self.index % SEMITONES_PER_OCTAVE + (octave + 1) * SEMITONES_PER_OCTAVE
        if not MIDI_MIN <= new_index <= MIDI_MAX:
            return False
        self.index = new_index
        return True

    def set_key(self, key: str) -> bool:
        """
        Change the pitch class, keeping the octave.

        Args:
            key: Key name like 'Eb' (any octave in it is ignored)

        Returns:
            True on success, False (note unchanged) if the result would
            be outside [0, 127]

        Raises:
            MalformedNoteName: If key is not a valid name
        """
        parsed = parse_note_name(key)
        pitch_class = PitchClass.parse(key)
        new_index = pitch_class.value + (self.octave() + 1) * SEMITONES_PER_OCTAVE
        if not MIDI_MIN <= new_index <= MIDI_MAX:
            return False
        self.index = new_index
        if parsed.accidental:
            self.preference = (
                NotationPreference.SHARP if parsed.accidental == "#" else NotationPreference.FLAT
            )
        return True

    def octave_up(self) -> bool:
        """Move up an octave. Returns False (note unchanged) at the top of the range."""
        return self._shift(SEMITONES_PER_OCTAVE)

    def octave_down(self) -> bool:
        """Move down an octave. Returns False (note unchanged) at the bottom of the range."""
        return self._shift(-SEMITONES_PER_OCTAVE)

    def _shift(self, semitones: int) -> bool:
        new_index = self.index + semitones
        if not MIDI_MIN <= new_index <= MIDI_MAX:
            return False
        self.index = new_index
        return True

    # ------------------------------------------------------------------
    # Extrapolators
    # ------------------------------------------------------------------

    def copy(self) -> Note:
        """Independent copy of this note."""
        return Note(self.index, self.preference)

    def transpose(self, semitones: int) -> Note:
        """New note shifted by a number of semitones (raises PitchOutOfRange)."""
        return Note(self.index + semitones, self.preference)

    def with_octave(self, octave: int) -> Note:
        """New note with the same pitch class in another octave (raises PitchOutOfRange)."""
        return Note(
            self.index % SEMITONES_PER_OCTAVE + (octave + 1) * SEMITONES_PER_OCTAVE,
            self.preference,
        )

    def interval(self, value: IntervalName | str | int, direction: int = 1) -> Note:
        """Note at a named interval or semitone count above (1) or below (-1)."""
        from chuk_mcp_theory.core.interval import interval

        return interval(self, value, direction)

    def scale(self, kind: ScaleKind | str) -> list[Note]:
        """Scale with this note as tonic."""
        from chuk_mcp_theory.core.scale import build_scale

        return build_scale(self, kind)

    def scale_degree(self, kind: ScaleKind | str, degree: int) -> Note:
        """Note at a 1-indexed degree of the scale on this tonic."""
        from chuk_mcp_theory.core.scale import scale_degree

        return scale_degree(self, kind, degree)

    def chord(self, quality: ChordQuality | str, inversion: int = 0) -> list[Note]:
        """Chord with this note as root."""
        from chuk_mcp_theory.core.chord import build_chord

        return build_chord(self, quality, inversion)

    def chord_from_name(self, name: str, octave: int | None = None) -> list[Note]:
        """
        Chord from a quality suffix like 'min7' or 'Maj7/E', rooted on this note.

        The root is voiced at this note's octave unless another is given.
        """
        from chuk_mcp_theory.core.chord import chord_from_name

        target = self.octave() if octave is None else octave
        return chord_from_name(f"{self.key()}{name}", target)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.index == other.index

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.index < other.index

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return self.name()

    def __repr__(self) -> str:
        return f"Note({self.name()!r})"

