"""
Theory errors.

Every failure the engine reports is a TheoryError, and every TheoryError is a
ValueError, so callers that only know about ValueError keep working.
None of these are fatal: each aborts the single call that raised it.
"""

from __future__ import annotations

from chuk_mcp_theory.constants import ErrorMessages


class TheoryError(ValueError):
    """Base class for all theory engine errors."""


class MalformedNoteName(TheoryError):
    """A note name did not match the note grammar."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ErrorMessages.MALFORMED_NOTE.format(name=name))


class PitchOutOfRange(TheoryError):
    """A computed pitch index fell outside [0, 127]."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(ErrorMessages.PITCH_OUT_OF_RANGE.format(index=index))


class UnknownChordQuality(TheoryError):
    """A chord quality token is not in the vocabulary."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(ErrorMessages.UNKNOWN_CHORD_QUALITY.format(token=token))


class UnknownScaleKind(TheoryError):
    """A scale name is not in the vocabulary."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ErrorMessages.UNKNOWN_SCALE_KIND.format(name=name))


class UnknownInterval(TheoryError):
    """An interval name is not in the interval table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ErrorMessages.UNKNOWN_INTERVAL.format(name=name))


class BassNotInChord(TheoryError):
    """The figured-bass note of a slash chord is not a member of the chord."""

    def __init__(self, bass: str, chord: str) -> None:
        self.bass = bass
        self.chord = chord
        super().__init__(ErrorMessages.BASS_NOT_IN_CHORD.format(bass=bass, chord=chord))


class InvalidScaleDegree(TheoryError):
    """A scale degree outside the scale's length was requested."""

    def __init__(self, degree: int, kind: str, size: int) -> None:
        self.degree = degree
        super().__init__(
            ErrorMessages.INVALID_SCALE_DEGREE.format(degree=degree, kind=kind, size=size)
        )
