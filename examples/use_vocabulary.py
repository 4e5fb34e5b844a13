#!/usr/bin/env python3
"""
Example: Extending the Vocabulary.

This demonstrates how YAML vocabulary files add scales and chord
qualities on top of the built-in tables, and how project files
override the shipped library.

Usage:
    python examples/use_vocabulary.py
"""

import tempfile
from pathlib import Path

import yaml

from chuk_mcp_theory.core import Note, build_scale, chord_from_name
from chuk_mcp_theory.vocabulary import VocabularyLoader


def main() -> None:
    """Demonstrate the vocabulary system."""
    print("CHUK Theory Vocabulary Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_theory/vocabulary/library"

    with tempfile.TemporaryDirectory() as tmp:
        project_path = Path(tmp)

        # A project file: one new chord, one override, one clash with a built-in
        with open(project_path / "mine.yaml", "w") as f:
            yaml.dump(
                {
                    "chords": {
                        "quartal": {"offsets": [0, 5, 10], "description": "Stacked fourths"},
                        "add9": [0, 4, 7, 26],
                        "Maj7": [0, 1, 2],
                    },
                },
                f,
            )

        loader = VocabularyLoader(library_path=library_path, project_path=project_path)
        vocabulary = loader.load()

        print("Vocabulary files:")
        for path in loader.list_files():
            print(f"  {path.name}")
        print()

        print("Extra scales:")
        for definition in vocabulary.scales.values():
            print(f"  {definition.name}: {list(definition.offsets)}")
        print()

        print("Extra chords:")
        for definition in vocabulary.chords.values():
            print(f"  {definition.token}: {list(definition.offsets)}")
        print()

        print("Using them:")
        notes = build_scale(Note("C4"), "whole_tone", vocabulary)
        print(f"  C whole tone: {' '.join(n.name() for n in notes)}")
        for name in ["Cquartal", "Cadd9", "Am6", "CMaj7"]:
            notes = chord_from_name(name, vocabulary=vocabulary)
            print(f"  {name:<9} {' '.join(n.name() for n in notes)}")


if __name__ == "__main__":
    main()
