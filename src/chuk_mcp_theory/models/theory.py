"""
Result models - serializable views of engine results.

These are what the MCP tools return: plain data describing notes,
chords and scales, for display or for a playback collaborator that
only needs names and frequencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Self

from pydantic import BaseModel, Field

from chuk_mcp_theory.constants import REFERENCE_FREQUENCY, NotationPreference
from chuk_mcp_theory.core.note import Note


class NoteInfo(BaseModel):
    """Descriptors of a single note."""

    name: str = Field(..., description="Full name, e.g. 'Db5'")
    key: str = Field(..., description="Name without octave, e.g. 'Db'")
    midi: int = Field(..., ge=0, le=127, description="Pitch index (MIDI note number)")
    octave: int = Field(..., ge=-1, le=9, description="Octave number")
    frequency: float = Field(..., gt=0, description="Frequency in Hz")
    preference: NotationPreference = Field(..., description="Spelling preference")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note, reference: float = REFERENCE_FREQUENCY) -> NoteInfo:
        """Create info from a note."""
        return cls(
            name=note.name(),
            key=note.key(),
            midi=note.midi(),
            octave=note.octave(),
            frequency=round(note.frequency(reference), 3),
            preference=note.preference,
        )


class NoteSequenceInfo(BaseModel):
    """An ordered group of notes (chord or scale)."""

    name: str = Field(..., description="Chord or scale name")
    notes: list[NoteInfo] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def names(self) -> list[str]:
        return [n.name for n in self.notes]

    @property
    def midi(self) -> list[int]:
        return [n.midi for n in self.notes]

    @classmethod
    def from_notes(
        cls,
        name: str,
        notes: Sequence[Note],
        reference: float = REFERENCE_FREQUENCY,
        **fields: Any,
    ) -> Self:
        """Create info from a list of notes; subclasses pass their extra fields."""
        return cls(name=name, notes=[NoteInfo.from_note(n, reference) for n in notes], **fields)


class ChordInfo(NoteSequenceInfo):
    """A chord: its notes plus the quality and inversion that produced it."""

    quality: str = Field(..., description="Quality token, e.g. 'Dom7'")
    inversion: int = Field(0, ge=0, description="Inversion applied")


class ScaleInfo(NoteSequenceInfo):
    """A scale: its notes plus the scale kind."""

    kind: str = Field(..., description="Scale kind, e.g. 'Major'")
    tonic: str = Field(..., description="Tonic name")
