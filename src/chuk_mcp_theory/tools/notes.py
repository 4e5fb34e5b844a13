"""
Note tools - MCP tools for single notes.

Tools for describing notes, moving them by intervals, measuring
distances, and changing octaves.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import REFERENCE_FREQUENCY
from chuk_mcp_theory.core import Note, TheoryError
from chuk_mcp_theory.core.interval import IntervalName, interval, interval_between
from chuk_mcp_theory.models import NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_note_input(note: str | int, preference: str | None = None) -> Note:
    """
    Build a Note from tool input.

    Tool callers pass either a name ('Db5') or a pitch index, possibly
    as a string ('73'). Surrounding whitespace is dropped here; the
    note grammar itself does not allow it.
    """
    if isinstance(note, str):
        note = note.strip()
        if note.lstrip("-").isdigit():
            return Note(int(note), preference)
    return Note(note, preference)


def error_response(message: str) -> str:
    """JSON error payload."""
    return json.dumps({"status": "error", "message": message})


def register_note_tools(
    mcp: ChukMCPServer,
    reference: float = REFERENCE_FREQUENCY,
) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance
        reference: Frequency of A4 used when reporting frequencies

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_note(note: str, preference: str | None = None) -> str:
        """
        Describe a note.

        Returns the note's name, key, pitch index, octave and frequency.

        Args:
            note: Note name ('Db5', 'f#3') or pitch index ('61')
            preference: Spelling for black keys: 'sharp', 'flat' or omitted

        Returns:
            JSON string with note details

        Example:
            theory_describe_note(note="A4")
        """
        try:
            n = parse_note_input(note, preference)
            info = NoteInfo.from_note(n, reference)
            return json.dumps({"status": "success", "note": info.model_dump(mode="json")})
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to describe note")
            return error_response(str(e))

    tools["theory_describe_note"] = theory_describe_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(
        note: str,
        interval_name: str | None = None,
        semitones: int | None = None,
        direction: int = 1,
    ) -> str:
        """
        Move a note by an interval.

        Give either a named interval ('P5', 'm3', 'M9') or a semitone count.

        Args:
            note: Starting note name or pitch index
            interval_name: Named interval (P1-P12, m2-m10, M2-M10, d4-d8, A2-A5)
            semitones: Semitone count (any sign), used when no name is given
            direction: 1 for up, -1 for down

        Returns:
            JSON string with the starting and resulting notes

        Example:
            theory_transpose(note="C4", interval_name="P5")
        """
        try:
            if (interval_name is None) == (semitones is None):
                return error_response("Give exactly one of interval_name or semitones")

            start = parse_note_input(note)
            value: IntervalName | int
            if interval_name is not None:
                value = IntervalName.parse(interval_name)
            else:
                value = int(semitones)  # type: ignore[arg-type]
            result = interval(start, value, direction)
            return json.dumps(
                {
                    "status": "success",
                    "from": NoteInfo.from_note(start, reference).model_dump(mode="json"),
                    "to": NoteInfo.from_note(result, reference).model_dump(mode="json"),
                    "semitones": start.distance_to(result),
                }
            )
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to transpose note")
            return error_response(str(e))

    tools["theory_transpose"] = theory_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def theory_distance(from_note: str, to_note: str) -> str:
        """
        Measure the distance between two notes.

        Args:
            from_note: First note
            to_note: Second note

        Returns:
            JSON string with the signed semitone distance (positive when
            to_note is higher) and the interval name when there is one

        Example:
            theory_distance(from_note="C4", to_note="G4")
        """
        try:
            a = parse_note_input(from_note)
            b = parse_note_input(to_note)
            distance = a.distance_to(b)
            lower, upper = (a, b) if distance >= 0 else (b, a)
            named = interval_between(lower, upper)
            return json.dumps(
                {
                    "status": "success",
                    "from": a.name(),
                    "to": b.name(),
                    "semitones": distance,
                    "interval": named.value if named is not None else None,
                }
            )
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to measure distance")
            return error_response(str(e))

    tools["theory_distance"] = theory_distance

    @mcp.tool  # type: ignore[arg-type]
    async def theory_set_octave(note: str, octave: int) -> str:
        """
        Move a note to another octave, keeping its pitch class.

        Args:
            note: Note name or pitch index
            octave: Target octave (-1 to 9)

        Returns:
            JSON string with the moved note, or an error if the result
            would be outside the MIDI range

        Example:
            theory_set_octave(note="Eb4", octave=2)
        """
        try:
            n = parse_note_input(note)
            if not n.set_octave(octave):
                return error_response(f"{n.key()}{octave} is outside the MIDI range")
            info = NoteInfo.from_note(n, reference)
            return json.dumps({"status": "success", "note": info.model_dump(mode="json")})
        except TheoryError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Failed to set octave")
            return error_response(str(e))

    tools["theory_set_octave"] = theory_set_octave

    return tools
