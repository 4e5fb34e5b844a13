"""
Vocabulary loader - discovers and loads extra scales and chord qualities.

Vocabulary files can come from:
1. Built-in library (shipped with package)
2. Project vocabulary (user's project/vocabulary directory)

File format:

    scales:
      whole_tone:
        offsets: [0, 2, 4, 6, 8, 10, 12]
        description: Six equal whole steps
    chords:
      add9:
        offsets: [0, 4, 7, 14]

Definitions that reuse a built-in scale or chord name are skipped;
the built-in tables are never changed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_theory.core.chord import ChordQuality
from chuk_mcp_theory.core.errors import UnknownChordQuality, UnknownScaleKind
from chuk_mcp_theory.core.scale import ScaleKind
from chuk_mcp_theory.models.vocabulary import ChordDefinition, ScaleDefinition, Vocabulary

logger = logging.getLogger(__name__)


def _is_builtin_scale(name: str) -> bool:
    try:
        ScaleKind.parse(name)
    except UnknownScaleKind:
        return False
    return True


def _is_builtin_chord(token: str) -> bool:
    try:
        ChordQuality.parse(token)
    except UnknownChordQuality:
        return False
    return True


class VocabularyLoader:
    """
    Discovers and loads vocabulary definitions.

    Vocabulary is loaded from YAML files in the library and project directories.
    Project definitions override library definitions with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the vocabulary loader.

        Args:
            library_path: Path to built-in vocabulary library
            project_path: Path to project vocabulary directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: Vocabulary | None = None

    def list_files(self) -> list[Path]:
        """List vocabulary files, library first, then project."""
        files: list[Path] = []
        if self.library_path.exists():
            files.extend(sorted(self.library_path.glob("*.yaml")))
        if self.project_path and self.project_path.exists():
            files.extend(sorted(self.project_path.glob("*.yaml")))
        return files

    def load(self) -> Vocabulary:
        """
        Load and merge all vocabulary files.

        Returns:
            Merged vocabulary (cached until clear_cache)
        """
        if self._cache is not None:
            return self._cache

        vocabulary = Vocabulary()
        for path in self.list_files():
            loaded = self.load_file(path)
            if loaded is not None:
                vocabulary = vocabulary.merged(loaded)

        logger.debug(
            "Loaded vocabulary: %d scales, %d chords",
            len(vocabulary.scales),
            len(vocabulary.chords),
        )
        self._cache = vocabulary
        return vocabulary

    def load_file(self, path: Path) -> Vocabulary | None:
        """
        Load a single vocabulary file.

        Returns:
            Vocabulary, or None if the file cannot be read or is invalid
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            return self._parse_vocabulary(data)
        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            logger.warning("Skipping vocabulary file %s: %s", path, e)
            return None

    def _parse_vocabulary(self, data: dict[str, Any]) -> Vocabulary:
        """Parse vocabulary from YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Vocabulary file must contain a mapping")

        scales: dict[str, ScaleDefinition] = {}
        for name, entry in (data.get("scales") or {}).items():
            name = str(name)
            if _is_builtin_scale(name):
                logger.warning("Ignoring vocabulary scale '%s': built-in name", name)
                continue
            scales[name] = ScaleDefinition(name=name, **self._entry(entry))

        chords: dict[str, ChordDefinition] = {}
        for token, entry in (data.get("chords") or {}).items():
            token = str(token)
            if _is_builtin_chord(token):
                logger.warning("Ignoring vocabulary chord '%s': built-in token", token)
                continue
            chords[token] = ChordDefinition(token=token, **self._entry(entry))

        return Vocabulary(scales=scales, chords=chords)

    def _entry(self, entry: Any) -> dict[str, Any]:
        """Accept either {offsets: [...], description: ...} or a bare offset list."""
        if isinstance(entry, list):
            return {"offsets": tuple(entry)}
        if isinstance(entry, dict):
            return {
                "offsets": tuple(entry.get("offsets") or ()),
                "description": entry.get("description", ""),
            }
        raise ValueError(f"Invalid vocabulary entry: {entry!r}")

    def clear_cache(self) -> None:
        """Clear the vocabulary cache."""
        self._cache = None
