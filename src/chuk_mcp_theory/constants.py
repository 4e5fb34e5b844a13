"""
Constants and enums for the theory engine.

No magic strings - use enums for constrained values.
"""

from __future__ import annotations

from enum import Enum

# MIDI pitch index range
MIDI_MIN = 0
MIDI_MAX = 127

SEMITONES_PER_OCTAVE = 12

# Concert A (A4)
REFERENCE_INDEX = 69
REFERENCE_FREQUENCY = 440.0

# Octave assumed when a note name omits it
DEFAULT_OCTAVE = 4

# Octave of the root when a chord is built from a chord name
DEFAULT_CHORD_OCTAVE = 3


class NotationPreference(str, Enum):
    """
    Spelling preference for the five black-key pitch classes.

    A rendering hint only - it never changes which pitch a note is.
    NATURAL means "unspecified" and renders black keys as flats.
    """

    SHARP = "#"
    FLAT = "b"
    NATURAL = "n"

    @classmethod
    def parse(cls, value: str | NotationPreference | None) -> NotationPreference:
        """Parse a preference from '#', 'b', 'n' or a member name like 'sharp'."""
        if value is None:
            return cls.NATURAL
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown notation preference: {value!r}")
        for member in cls:
            if value == member.value or value.lower() == member.name.lower():
                return member
        raise ValueError(f"Unknown notation preference: {value!r}")


class ErrorMessages:
    """Standardized error messages."""

    MALFORMED_NOTE = (
        "Malformed note name: '{name}'. "
        "Expected a letter A-G, optional '#' or 'b', optional octave -1..9."
    )
    PITCH_OUT_OF_RANGE = "Pitch index {index} is out of range [0, 127]."
    UNKNOWN_CHORD_QUALITY = "Unknown chord quality: '{token}'."
    UNKNOWN_SCALE_KIND = "Unknown scale kind: '{name}'."
    UNKNOWN_INTERVAL = "Unknown interval: '{name}'."
    BASS_NOT_IN_CHORD = "Figured bass '{bass}' is not in chord '{chord}'."
    INVALID_SCALE_DEGREE = "Scale degree {degree} is out of range for {kind} (1-{size})."
    INVALID_DIRECTION = "Interval direction must be 1 or -1, got {direction}."
    NEGATIVE_INVERSION = "Inversion must be non-negative, got {inversion}."
