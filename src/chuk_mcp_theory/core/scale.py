"""
Scale primitives - ScaleKind and scale construction.

Scales are offset tables from a tonic. Each table lists the semitone
offset of every scale note, ascending, starting at 0 and (for octave
scales) ending on the octave:

    MAJOR = (0, 2, 4, 5, 7, 9, 11, 12)

Adding a scale kind is a data change: add a member and a table row,
or define it in a vocabulary YAML file.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from chuk_mcp_theory.constants import SEMITONES_PER_OCTAVE
from chuk_mcp_theory.core.errors import InvalidScaleDegree, UnknownScaleKind
from chuk_mcp_theory.core.note import Note

if TYPE_CHECKING:
    from chuk_mcp_theory.models.vocabulary import Vocabulary


class ScaleKind(str, Enum):
    """Built-in scale kinds."""

    MAJOR = "Major"
    MINOR = "Minor"
    PENTATONIC = "Pentatonic"
    HARMONIC_MINOR = "HarmonicMinor"
    MELODIC_MINOR = "MelodicMinor"
    HARMONIC_MAJOR = "HarmonicMajor"
    DORIAN = "Dorian"
    PHRYGIAN = "Phrygian"
    LYDIAN = "Lydian"
    MIXOLYDIAN = "Mixolydian"
    LOCRIAN = "Locrian"
    MINOR_PENTATONIC = "MinorPentatonic"
    BLUES = "Blues"
    CHROMATIC = "Chromatic"

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitone offsets from the tonic."""
        return SCALE_TABLE[self]

    @classmethod
    def parse(cls, name: str | ScaleKind) -> ScaleKind:
        """
        Parse a scale kind from 'Major', 'harmonic_minor', 'HARMONIC MINOR', ...

        Raises:
            UnknownScaleKind: If no built-in scale matches
        """
        if isinstance(name, cls):
            return name
        wanted = _normalize(str(name))
        for member in cls:
            if wanted in (_normalize(member.value), _normalize(member.name)):
                return member
        alias = _SCALE_ALIASES.get(wanted)
        if alias is not None:
            return alias
        raise UnknownScaleKind(str(name))


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "").replace(" ", "").replace("-", "")


SCALE_TABLE: Mapping[ScaleKind, tuple[int, ...]] = MappingProxyType(
    {
        ScaleKind.MAJOR: (0, 2, 4, 5, 7, 9, 11, 12),
        ScaleKind.MINOR: (0, 2, 3, 5, 7, 8, 10, 12),
        ScaleKind.PENTATONIC: (0, 2, 4, 7, 9, 12),
        ScaleKind.HARMONIC_MINOR: (0, 2, 3, 5, 7, 8, 11, 12),
        ScaleKind.MELODIC_MINOR: (0, 2, 3, 5, 7, 9, 11, 12),
        ScaleKind.HARMONIC_MAJOR: (0, 2, 4, 5, 7, 8, 11, 12),
        ScaleKind.DORIAN: (0, 2, 3, 5, 7, 9, 10, 12),
        ScaleKind.PHRYGIAN: (0, 1, 3, 5, 7, 8, 10, 12),
        ScaleKind.LYDIAN: (0, 2, 4, 6, 7, 9, 11, 12),
        ScaleKind.MIXOLYDIAN: (0, 2, 4, 5, 7, 9, 10, 12),
        ScaleKind.LOCRIAN: (0, 1, 3, 5, 6, 8, 10, 12),
        ScaleKind.MINOR_PENTATONIC: (0, 3, 5, 7, 10, 12),
        ScaleKind.BLUES: (0, 3, 5, 6, 7, 10, 12),
        ScaleKind.CHROMATIC: (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12),
    }
)

_SCALE_ALIASES: dict[str, ScaleKind] = {
    "ionian": ScaleKind.MAJOR,
    "aeolian": ScaleKind.MINOR,
    "naturalminor": ScaleKind.MINOR,
    "pent": ScaleKind.PENTATONIC,
    "majorpentatonic": ScaleKind.PENTATONIC,
}


def resolve_scale_offsets(
    kind: ScaleKind | str, vocabulary: Vocabulary | None = None
) -> tuple[int, ...]:
    """
    Look up the offset table for a scale.

    Built-in kinds are checked first, then the vocabulary (if given).

    Raises:
        UnknownScaleKind: If the name is in neither
    """
    try:
        return ScaleKind.parse(kind).offsets
    except UnknownScaleKind:
        if vocabulary is not None:
            offsets = vocabulary.scale_offsets(str(kind))
            if offsets is not None:
                return offsets
        raise


def _scale_label(kind: ScaleKind | str) -> str:
    return kind.value if isinstance(kind, ScaleKind) else str(kind)


def build_scale(
    tonic: Note, kind: ScaleKind | str, vocabulary: Vocabulary | None = None
) -> list[Note]:
    """
    Build a scale from a tonic.

    Args:
        tonic: First note of the scale
        kind: Scale kind or scale name
        vocabulary: Extra scale definitions

    Returns:
        Ascending list of notes, spelled with the tonic's preference

    Raises:
        UnknownScaleKind: If the scale is not known
        PitchOutOfRange: If any scale note would fall outside [0, 127]
    """
    offsets = resolve_scale_offsets(kind, vocabulary)
    return [tonic.transpose(offset) for offset in offsets]


def scale_degree(
    tonic: Note,
    kind: ScaleKind | str,
    degree: int,
    vocabulary: Vocabulary | None = None,
) -> Note:
    """
    Get the note at a scale degree.

    Degrees are 1-indexed: degree 1 is the tonic.

    Raises:
        InvalidScaleDegree: If degree is outside 1..len(scale)
    """
    offsets = resolve_scale_offsets(kind, vocabulary)
    if not 1 <= degree <= len(offsets):
        raise InvalidScaleDegree(degree, _scale_label(kind), len(offsets))
    return tonic.transpose(offsets[degree - 1])


def _pitch_steps(offsets: Sequence[int]) -> tuple[int, ...]:
    """Offsets within one octave (drops a closing octave entry)."""
    if len(offsets) > 1 and offsets[-1] == SEMITONES_PER_OCTAVE:
        return tuple(offsets[:-1])
    return tuple(offsets)


def diatonic_chord(
    tonic: Note,
    kind: ScaleKind | str,
    degree: int,
    size: int = 3,
    inversion: int = 0,
    vocabulary: Vocabulary | None = None,
) -> list[Note]:
    """
    Build a chord by stacking thirds on a scale degree.

    Every other scale note from the degree upwards, wrapping into higher
    octaves, e.g. degree 2 of C major with size 3 is D4 F4 A4, and
    degree 7 with size 4 is B4 D5 F5 A5.

    Args:
        tonic: Scale tonic
        kind: Scale kind or scale name
        degree: 1-indexed scale degree of the chord root
        size: Number of chord tones (3 = triad, 4 = seventh chord)
        inversion: Chord inversion to apply

    Raises:
        InvalidScaleDegree: If degree is outside the scale
        PitchOutOfRange: If a chord tone falls outside [0, 127]
    """
    from chuk_mcp_theory.core.chord import invert_chord

    steps = _pitch_steps(resolve_scale_offsets(kind, vocabulary))
    if not 1 <= degree <= len(steps):
        raise InvalidScaleDegree(degree, _scale_label(kind), len(steps))
    if size < 1:
        raise ValueError(f"Chord size must be at least 1, got {size}")

    notes = []
    for i in range(size):
        position = degree - 1 + 2 * i
        octaves, step = divmod(position, len(steps))
        notes.append(tonic.transpose(steps[step] + octaves * SEMITONES_PER_OCTAVE))
    return invert_chord(notes, inversion)
