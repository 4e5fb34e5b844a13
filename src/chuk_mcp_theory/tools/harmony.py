"""
Harmony tools - MCP tools for chords and scales.

Tools for building chords (by root and quality, or by chord name),
scales, scale degrees, diatonic chords, and for listing the available
vocabulary.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import DEFAULT_CHORD_OCTAVE, REFERENCE_FREQUENCY
from chuk_mcp_theory.core import (
    CHORD_TABLE,
    INTERVAL_TABLE,
    SCALE_TABLE,
    TheoryError,
    build_chord,
    build_scale,
    chord_from_name,
    chord_name,
    diatonic_chord,
    parse_chord_name,
    resolve_quality,
    scale_degree,
)
from chuk_mcp_theory.core.chord import quality_label
from chuk_mcp_theory.models import ChordInfo, NoteInfo, ScaleInfo
from chuk_mcp_theory.tools.notes import error_response, parse_note_input
from chuk_mcp_theory.vocabulary import VocabularyLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_harmony_tools(
    mcp: ChukMCPServer,
    vocabulary_loader: VocabularyLoader,
    reference: float = REFERENCE_FREQUENCY,
) -> dict[str, Any]:
    """
    Register chord and scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        vocabulary_loader: Loader for extra scales and chord qualities
        reference: Frequency of A4 used when reporting frequencies

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(root: str, quality: str, inversion: int = 0) -> str:
        """
        Build a chord on a root note.

        Args:
            root: Root note name or pitch index (e.g. 'C4')
            quality: Quality token (Maj, min, Dim, Aug, Maj7, min7, Dom7,
                sus2, sus4, Dom9, Maj11, Dim7, min7b5, or a vocabulary token)
            inversion: 0 = root position, 1 = first inversion, ...

        Returns:
            JSON string with the chord notes

        Example:
            theory_build_chord(root="C4", quality="Dom7", inversion=1)
        """
        try:
            vocabulary = vocabulary_loader.load()
            root_note = parse_note_input(root)
            resolved = resolve_quality(quality, vocabulary)
            notes = build_chord(root_note, resolved, inversion, vocabulary)
            info = ChordInfo.from_notes(
                chord_name(root_note, resolved),
                notes,
                reference,
                quality=quality_label(resolved),
                inversion=inversion,
            )
            return json.dumps({"status": "success", "chord": info.model_dump(mode="json")})
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to build chord")
            return error_response(str(e))

    tools["theory_build_chord"] = theory_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_from_name(name: str, octave: int = DEFAULT_CHORD_OCTAVE) -> str:
        """
        Build a chord from its name.

        A '/bass' suffix puts that chord tone in the bass by inverting
        the chord ('Cmaj7/E' starts on E).

        Args:
            name: Chord name, e.g. 'Dmin7', 'F#sus4', 'Cmaj7/E'
            octave: Octave of the root (default 3)

        Returns:
            JSON string with the chord notes

        Example:
            theory_chord_from_name(name="Cmaj7/E")
        """
        try:
            vocabulary = vocabulary_loader.load()
            parsed = parse_chord_name(name, vocabulary)
            notes = chord_from_name(name, octave, vocabulary=vocabulary)
            # The root sits at len - inversion after rotating
            root_position = next(
                i for i, n in enumerate(notes) if n.pitch_class() == parsed.root_pitch_class
            )
            inversion = (len(notes) - root_position) % len(notes)
            info = ChordInfo.from_notes(
                str(parsed),
                notes,
                reference,
                quality=quality_label(parsed.quality),
                inversion=inversion,
            )
            return json.dumps({"status": "success", "chord": info.model_dump(mode="json")})
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to build chord from name")
            return error_response(str(e))

    tools["theory_chord_from_name"] = theory_chord_from_name

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_scale(tonic: str, kind: str = "Major") -> str:
        """
        Build a scale from a tonic.

        Args:
            tonic: Tonic note name or pitch index (e.g. 'C4')
            kind: Scale kind (Major, Minor, Pentatonic, HarmonicMinor, Dorian, ...
                or a vocabulary scale such as 'whole_tone')

        Returns:
            JSON string with the scale notes

        Example:
            theory_build_scale(tonic="D4", kind="Dorian")
        """
        try:
            vocabulary = vocabulary_loader.load()
            tonic_note = parse_note_input(tonic)
            notes = build_scale(tonic_note, kind, vocabulary)
            info = ScaleInfo.from_notes(
                f"{tonic_note.key()} {kind}",
                notes,
                reference,
                kind=kind,
                tonic=tonic_note.name(),
            )
            return json.dumps({"status": "success", "scale": info.model_dump(mode="json")})
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to build scale")
            return error_response(str(e))

    tools["theory_build_scale"] = theory_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale_degree(tonic: str, kind: str, degree: int) -> str:
        """
        Get the note at a scale degree.

        Args:
            tonic: Tonic note name or pitch index
            kind: Scale kind
            degree: 1-indexed degree (1 = tonic)

        Returns:
            JSON string with the note

        Example:
            theory_scale_degree(tonic="C4", kind="Major", degree=5)
        """
        try:
            vocabulary = vocabulary_loader.load()
            note = scale_degree(parse_note_input(tonic), kind, degree, vocabulary)
            info = NoteInfo.from_note(note, reference)
            return json.dumps(
                {"status": "success", "degree": degree, "note": info.model_dump(mode="json")}
            )
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to resolve scale degree")
            return error_response(str(e))

    tools["theory_scale_degree"] = theory_scale_degree

    @mcp.tool  # type: ignore[arg-type]
    async def theory_diatonic_chord(
        tonic: str,
        kind: str,
        degree: int,
        size: int = 3,
        inversion: int = 0,
    ) -> str:
        """
        Build a chord from a scale by stacking thirds on a degree.

        Args:
            tonic: Tonic note name or pitch index
            kind: Scale kind
            degree: 1-indexed degree of the chord root
            size: Number of chord tones (3 = triad, 4 = seventh)
            inversion: Inversion to apply

        Returns:
            JSON string with the chord notes

        Example:
            theory_diatonic_chord(tonic="C4", kind="Major", degree=5, size=4)
        """
        try:
            vocabulary = vocabulary_loader.load()
            tonic_note = parse_note_input(tonic)
            notes = diatonic_chord(tonic_note, kind, degree, size, inversion, vocabulary)
            info = ChordInfo.from_notes(
                f"{tonic_note.key()} {kind} degree {degree}",
                notes,
                reference,
                quality=f"{size} tones",
                inversion=inversion,
            )
            return json.dumps({"status": "success", "chord": info.model_dump(mode="json")})
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to build diatonic chord")
            return error_response(str(e))

    tools["theory_diatonic_chord"] = theory_diatonic_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_vocabulary() -> str:
        """
        List available scales, chord qualities and intervals.

        Includes the built-in tables and any vocabulary loaded from the
        library and project directories.

        Returns:
            JSON string with offsets for every scale and chord, and the
            size of every named interval

        Example:
            theory_list_vocabulary()
        """
        try:
            vocabulary = vocabulary_loader.load()
            scales = {kind.value: list(offsets) for kind, offsets in SCALE_TABLE.items()}
            scales.update({d.name: list(d.offsets) for d in vocabulary.scales.values()})
            chords = {quality.value: list(offsets) for quality, offsets in CHORD_TABLE.items()}
            chords.update({d.token: list(d.offsets) for d in vocabulary.chords.values()})
            intervals = {name.value: semitones for name, semitones in INTERVAL_TABLE.items()}
            return json.dumps(
                {
                    "status": "success",
                    "scales": scales,
                    "chords": chords,
                    "intervals": intervals,
                }
            )
        except Exception as e:
            logger.exception("Failed to list vocabulary")
            return error_response(str(e))

    tools["theory_list_vocabulary"] = theory_list_vocabulary

    return tools
