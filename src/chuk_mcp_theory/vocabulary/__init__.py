"""
Vocabulary system - extra scales and chord qualities defined in YAML.

Vocabulary extends the built-in tables; it never replaces them.
"""

from chuk_mcp_theory.models.vocabulary import ChordDefinition, ScaleDefinition, Vocabulary
from chuk_mcp_theory.vocabulary.loader import VocabularyLoader

__all__ = [
    "ChordDefinition",
    "ScaleDefinition",
    "Vocabulary",
    "VocabularyLoader",
]
