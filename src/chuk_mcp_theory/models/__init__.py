"""
Pydantic models for the theory engine.

This module provides:
- NoteInfo, ChordInfo, ScaleInfo: serializable engine results
- ScaleDefinition, ChordDefinition, Vocabulary: user-defined tables
"""

from chuk_mcp_theory.models.theory import ChordInfo, NoteInfo, NoteSequenceInfo, ScaleInfo
from chuk_mcp_theory.models.vocabulary import ChordDefinition, ScaleDefinition, Vocabulary

__all__ = [
    "ChordDefinition",
    "ChordInfo",
    "NoteInfo",
    "NoteSequenceInfo",
    "ScaleDefinition",
    "ScaleInfo",
    "Vocabulary",
]
