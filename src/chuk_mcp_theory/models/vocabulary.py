"""
Vocabulary models - user-defined scales and chord qualities.

A vocabulary extends the built-in tables without modifying them.
Definitions come from YAML files (see vocabulary.loader) and are
validated here.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

# Largest span a scale definition may cover (two octaves)
MAX_SCALE_SPAN = 24

# Largest number of chord tones
MAX_CHORD_TONES = 6

_LEADING_LETTERS = re.compile(r"[A-Za-z]*")


def _check_offsets(offsets: tuple[int, ...]) -> tuple[int, ...]:
    if not offsets:
        raise ValueError("Offsets must not be empty")
    if offsets[0] != 0:
        raise ValueError(f"Offsets must start at 0, got {offsets[0]}")
    for lower, upper in zip(offsets, offsets[1:]):
        if upper <= lower:
            raise ValueError(f"Offsets must be strictly ascending: {list(offsets)}")
    return offsets


def is_short_form(token: str) -> bool:
    """
    True for tokens led by at most one letter ('m6', 'M6', '7sus4').

    A single leading letter is a case-sensitive quality mark, as in
    chord names: 'm' is minor and 'M' is major.
    """
    return len(_LEADING_LETTERS.match(token).group()) <= 1


def normalize_scale_name(name: str) -> str:
    """Lookup key for scale names ('Whole Tone' == 'whole_tone')."""
    return name.strip().lower().replace("_", "").replace(" ", "").replace("-", "")


class ScaleDefinition(BaseModel):
    """A named scale as semitone offsets from its tonic."""

    name: str = Field(..., min_length=1, description="Scale name")
    offsets: tuple[int, ...] = Field(..., description="Ascending offsets, starting at 0")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("offsets")
    @classmethod
    def validate_offsets(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Offsets start at 0, ascend, and stay within two octaves."""
        _check_offsets(v)
        if v[-1] > MAX_SCALE_SPAN:
            raise ValueError(f"Scale spans {v[-1]} semitones (max {MAX_SCALE_SPAN})")
        return v


class ChordDefinition(BaseModel):
    """A chord quality token as semitone offsets from its root."""

    token: str = Field(..., min_length=1, description="Quality token used in chord names")
    offsets: tuple[int, ...] = Field(..., description="Ascending offsets, starting at 0")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Tokens must be usable after a root in a chord name."""
        if "/" in v or any(ch.isspace() for ch in v):
            raise ValueError(f"Invalid chord token: {v!r}")
        if v[0] in "#b":
            # Would be read as the root's accidental
            raise ValueError(f"Chord token may not start with '#' or 'b': {v!r}")
        return v

    @field_validator("offsets")
    @classmethod
    def validate_offsets(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Offsets start at 0, ascend, and have at most six tones."""
        _check_offsets(v)
        if len(v) > MAX_CHORD_TONES:
            raise ValueError(f"Chord has {len(v)} tones (max {MAX_CHORD_TONES})")
        return v


class Vocabulary(BaseModel):
    """
    A set of extra scale and chord definitions.

    Scale names are matched loosely (case, spaces and underscores
    ignored). Chord tokens match exactly; word tokens like 'add9' also
    match case-insensitively, short forms like 'm6' never do.
    """

    scales: dict[str, ScaleDefinition] = Field(default_factory=dict)
    chords: dict[str, ChordDefinition] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def scale_offsets(self, name: str) -> tuple[int, ...] | None:
        """Offsets for a scale name, or None if not defined."""
        wanted = normalize_scale_name(name)
        for definition in self.scales.values():
            if normalize_scale_name(definition.name) == wanted:
                return definition.offsets
        return None

    def chord_offsets(self, token: str) -> tuple[int, ...] | None:
        """Offsets for a chord token, or None if not defined."""
        token = token.strip()
        if token in self.chords:
            return self.chords[token].offsets
        for definition in self.chords.values():
            if is_short_form(definition.token):
                continue
            if definition.token.lower() == token.lower():
                return definition.offsets
        return None

    def merged(self, other: Vocabulary) -> Vocabulary:
        """New vocabulary with other's definitions taking precedence."""
        return Vocabulary(
            scales={**self.scales, **other.scales},
            chords={**self.chords, **other.chords},
        )
