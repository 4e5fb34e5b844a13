"""
Core theory primitives.

These are the pure, table-driven building blocks:
- PitchClass, parse_note_name, to_index, to_name: name <-> pitch index
- Note: a pitch index with a spelling preference
- IntervalName, interval: named semitone offsets
- ScaleKind, build_scale: scales from a tonic
- ChordQuality, build_chord, chord_from_name: chords and inversions
"""

from chuk_mcp_theory.core.chord import (
    CHORD_TABLE,
    ChordQuality,
    ParsedChordName,
    build_chord,
    chord_from_name,
    chord_name,
    drop_chord,
    invert_chord,
    parse_chord_name,
    resolve_quality,
)
from chuk_mcp_theory.core.errors import (
    BassNotInChord,
    InvalidScaleDegree,
    MalformedNoteName,
    PitchOutOfRange,
    TheoryError,
    UnknownChordQuality,
    UnknownInterval,
    UnknownScaleKind,
)
from chuk_mcp_theory.core.interval import (
    INTERVAL_TABLE,
    IntervalName,
    IntervalQuality,
    interval,
    interval_between,
)
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.pitch import (
    ParsedNoteName,
    PitchClass,
    name_to_index,
    parse_note_name,
    to_index,
    to_name,
    validate_index,
)
from chuk_mcp_theory.core.scale import (
    SCALE_TABLE,
    ScaleKind,
    build_scale,
    diatonic_chord,
    resolve_scale_offsets,
    scale_degree,
)

__all__ = [
    # Pitch
    "PitchClass",
    "ParsedNoteName",
    "parse_note_name",
    "to_index",
    "to_name",
    "name_to_index",
    "validate_index",
    # Note
    "Note",
    # Interval
    "INTERVAL_TABLE",
    "IntervalName",
    "IntervalQuality",
    "interval",
    "interval_between",
    # Scale
    "SCALE_TABLE",
    "ScaleKind",
    "build_scale",
    "scale_degree",
    "diatonic_chord",
    "resolve_scale_offsets",
    # Chord
    "CHORD_TABLE",
    "ChordQuality",
    "ParsedChordName",
    "build_chord",
    "chord_from_name",
    "chord_name",
    "drop_chord",
    "invert_chord",
    "parse_chord_name",
    "resolve_quality",
    # Errors
    "TheoryError",
    "MalformedNoteName",
    "PitchOutOfRange",
    "UnknownChordQuality",
    "UnknownScaleKind",
    "UnknownInterval",
    "BassNotInChord",
    "InvalidScaleDegree",
]
