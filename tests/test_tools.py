"""
Tests for MCP tools.

Tests the MCP tool implementations for notes, chords, scales and
vocabulary.
"""

import json
from pathlib import Path

import pytest
import yaml

from chuk_mcp_theory.core import ChordQuality, Note, build_chord
from chuk_mcp_theory.models import ChordInfo, NoteInfo
from chuk_mcp_theory.tools.harmony import register_harmony_tools
from chuk_mcp_theory.tools.notes import parse_note_input, register_note_tools
from chuk_mcp_theory.vocabulary import VocabularyLoader


@pytest.fixture
def note_tools(mcp):
    """Registered note tools."""
    return register_note_tools(mcp)


@pytest.fixture
def harmony_tools(mcp, library_path: Path, temp_dir: Path):
    """Registered harmony tools with the built-in library and an empty project."""
    loader = VocabularyLoader(library_path=library_path, project_path=temp_dir)
    return register_harmony_tools(mcp, loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_note_tools_registered(self, mcp, note_tools) -> None:
        """Note tools are registered on the server."""
        assert set(note_tools) == {
            "theory_describe_note",
            "theory_transpose",
            "theory_distance",
            "theory_set_octave",
        }
        assert set(note_tools) <= set(mcp.tools)

    def test_harmony_tools_registered(self, mcp, harmony_tools) -> None:
        """Harmony tools are registered on the server."""
        assert set(harmony_tools) == {
            "theory_build_chord",
            "theory_chord_from_name",
            "theory_build_scale",
            "theory_scale_degree",
            "theory_diatonic_chord",
            "theory_list_vocabulary",
        }
        assert set(harmony_tools) <= set(mcp.tools)

    def test_parse_note_input(self) -> None:
        """Tool input accepts names and index strings."""
        assert parse_note_input("Db5").midi() == 73
        assert parse_note_input("61").name() == "Db4"
        assert parse_note_input("61", "sharp").name() == "C#4"
        assert parse_note_input(60).name() == "C4"
        assert parse_note_input(" C4 ").midi() == 60
        assert parse_note_input(" 61 ").midi() == 61


class TestResultModels:
    """Tests for the serializable result models."""

    def test_note_info(self) -> None:
        """Note descriptors are captured."""
        info = NoteInfo.from_note(Note("Eb5"))
        assert info.name == "Eb5"
        assert info.key == "Eb"
        assert info.midi == 75
        assert info.frequency == 622.254
        assert info.model_dump(mode="json")["preference"] == "b"

    def test_chord_info(self) -> None:
        """Sequences carry their notes and extra fields."""
        notes = build_chord(Note("C4"), ChordQuality.MAJOR)
        info = ChordInfo.from_notes("CMaj", notes, quality="Maj", inversion=0)
        assert info.names == ["C4", "E4", "G4"]
        assert info.midi == [60, 64, 67]
        assert info.quality == "Maj"


class TestNoteTools:
    """Tests for note tools."""

    @pytest.mark.asyncio
    async def test_describe_note(self, note_tools) -> None:
        """Describe a note."""
        result = await note_tools["theory_describe_note"](note="A4")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note"]["midi"] == 69
        assert data["note"]["octave"] == 4
        assert data["note"]["frequency"] == 440.0

    @pytest.mark.asyncio
    async def test_describe_note_by_index(self, note_tools) -> None:
        """Describe a note given as an index."""
        result = await note_tools["theory_describe_note"](note="75", preference="sharp")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note"]["name"] == "D#5"
        assert data["note"]["frequency"] == pytest.approx(622.254, abs=1e-3)

    @pytest.mark.asyncio
    async def test_describe_note_custom_reference(self, mcp) -> None:
        """The reference pitch changes reported frequencies."""
        tools = register_note_tools(mcp, reference=432.0)
        data = json.loads(await tools["theory_describe_note"](note="A4"))
        assert data["note"]["frequency"] == 432.0

    @pytest.mark.asyncio
    async def test_describe_note_malformed(self, note_tools) -> None:
        """Malformed names are errors."""
        data = json.loads(await note_tools["theory_describe_note"](note="H4"))
        assert data["status"] == "error"
        assert "H4" in data["message"]

    @pytest.mark.asyncio
    async def test_describe_note_out_of_range(self, note_tools) -> None:
        """Out-of-range indices are errors."""
        data = json.loads(await note_tools["theory_describe_note"](note="200"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_transpose_named(self, note_tools) -> None:
        """Transpose by a named interval."""
        result = await note_tools["theory_transpose"](note="C4", interval_name="P5")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["to"]["name"] == "G4"
        assert data["semitones"] == 7

    @pytest.mark.asyncio
    async def test_transpose_down(self, note_tools) -> None:
        """Transpose down."""
        result = await note_tools["theory_transpose"](note="C4", interval_name="M3", direction=-1)
        data = json.loads(result)
        assert data["to"]["name"] == "Ab3"
        assert data["semitones"] == -4

    @pytest.mark.asyncio
    async def test_transpose_semitones(self, note_tools) -> None:
        """Transpose by a semitone count."""
        data = json.loads(await note_tools["theory_transpose"](note="C4", semitones=-13))
        assert data["to"]["midi"] == 47

    @pytest.mark.asyncio
    async def test_transpose_needs_one_amount(self, note_tools) -> None:
        """Exactly one of interval_name and semitones is required."""
        data = json.loads(await note_tools["theory_transpose"](note="C4"))
        assert data["status"] == "error"
        data = json.loads(
            await note_tools["theory_transpose"](note="C4", interval_name="P5", semitones=7)
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_transpose_errors(self, note_tools) -> None:
        """Unknown intervals and range overflow are errors."""
        data = json.loads(await note_tools["theory_transpose"](note="C4", interval_name="X9"))
        assert data["status"] == "error"
        data = json.loads(await note_tools["theory_transpose"](note="G9", interval_name="m2"))
        assert data["status"] == "error"
        data = json.loads(
            await note_tools["theory_transpose"](note="C4", interval_name="P5", direction=0)
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_distance(self, note_tools) -> None:
        """Distance with interval name."""
        data = json.loads(await note_tools["theory_distance"](from_note="C4", to_note="G4"))
        assert data["semitones"] == 7
        assert data["interval"] == "P5"

    @pytest.mark.asyncio
    async def test_distance_descending(self, note_tools) -> None:
        """Descending distances are negative but still named."""
        data = json.loads(await note_tools["theory_distance"](from_note="E4", to_note="C4"))
        assert data["semitones"] == -4
        assert data["interval"] == "M3"

    @pytest.mark.asyncio
    async def test_distance_unnamed(self, note_tools) -> None:
        """Large distances have no interval name."""
        data = json.loads(await note_tools["theory_distance"](from_note="C1", to_note="C7"))
        assert data["semitones"] == 72
        assert data["interval"] is None

    @pytest.mark.asyncio
    async def test_set_octave(self, note_tools) -> None:
        """Move a note to another octave."""
        data = json.loads(await note_tools["theory_set_octave"](note="Eb4", octave=2))
        assert data["status"] == "success"
        assert data["note"]["name"] == "Eb2"

    @pytest.mark.asyncio
    async def test_set_octave_out_of_range(self, note_tools) -> None:
        """Octaves outside the range are errors."""
        data = json.loads(await note_tools["theory_set_octave"](note="A4", octave=9))
        assert data["status"] == "error"


class TestHarmonyTools:
    """Tests for chord and scale tools."""

    @pytest.mark.asyncio
    async def test_build_chord(self, harmony_tools) -> None:
        """Build a chord."""
        result = await harmony_tools["theory_build_chord"](root="C4", quality="Dom7", inversion=1)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["chord"]["name"] == "CDom7"
        assert data["chord"]["quality"] == "Dom7"
        assert data["chord"]["inversion"] == 1
        assert [n["midi"] for n in data["chord"]["notes"]] == [64, 67, 70, 72]

    @pytest.mark.asyncio
    async def test_build_chord_alias(self, harmony_tools) -> None:
        """Aliases resolve to canonical tokens."""
        data = json.loads(await harmony_tools["theory_build_chord"](root="A3", quality="m7"))
        assert data["chord"]["quality"] == "min7"
        assert data["chord"]["name"] == "Amin7"

    @pytest.mark.asyncio
    async def test_build_chord_vocabulary(self, harmony_tools) -> None:
        """Vocabulary qualities are available."""
        data = json.loads(await harmony_tools["theory_build_chord"](root="C4", quality="add9"))
        assert data["status"] == "success"
        assert [n["midi"] for n in data["chord"]["notes"]] == [60, 64, 67, 74]

    @pytest.mark.asyncio
    async def test_build_chord_unknown_quality(self, harmony_tools) -> None:
        """Unknown qualities are errors."""
        data = json.loads(await harmony_tools["theory_build_chord"](root="C4", quality="xyz"))
        assert data["status"] == "error"
        assert "xyz" in data["message"]

    @pytest.mark.asyncio
    async def test_build_chord_negative_inversion(self, harmony_tools) -> None:
        """Negative inversions are errors."""
        data = json.loads(
            await harmony_tools["theory_build_chord"](root="C4", quality="Maj", inversion=-1)
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_chord_from_name(self, harmony_tools) -> None:
        """Build a slash chord from its name."""
        data = json.loads(await harmony_tools["theory_chord_from_name"](name="Cmaj7/E"))
        assert data["status"] == "success"
        assert data["chord"]["name"] == "CMaj7/E"
        assert data["chord"]["inversion"] == 1
        assert [n["name"] for n in data["chord"]["notes"]] == ["E3", "G3", "B3", "C4"]

    @pytest.mark.asyncio
    async def test_chord_from_name_root_position(self, harmony_tools) -> None:
        """Chords without a bass are in root position."""
        data = json.loads(await harmony_tools["theory_chord_from_name"](name="Dmin", octave=4))
        assert data["chord"]["inversion"] == 0
        assert [n["midi"] for n in data["chord"]["notes"]] == [62, 65, 69]

    @pytest.mark.asyncio
    async def test_chord_from_name_bass_not_in_chord(self, harmony_tools) -> None:
        """A foreign bass note is an error."""
        data = json.loads(await harmony_tools["theory_chord_from_name"](name="Cmaj7/F"))
        assert data["status"] == "error"
        assert "F" in data["message"]

    @pytest.mark.asyncio
    async def test_build_scale(self, harmony_tools) -> None:
        """Build a scale."""
        data = json.loads(await harmony_tools["theory_build_scale"](tonic="C4"))
        assert data["status"] == "success"
        assert data["scale"]["kind"] == "Major"
        assert data["scale"]["tonic"] == "C4"
        assert [n["midi"] for n in data["scale"]["notes"]] == [60, 62, 64, 65, 67, 69, 71, 72]

    @pytest.mark.asyncio
    async def test_build_scale_vocabulary(self, harmony_tools) -> None:
        """Vocabulary scales are available."""
        data = json.loads(
            await harmony_tools["theory_build_scale"](tonic="C4", kind="whole_tone")
        )
        assert data["status"] == "success"
        assert len(data["scale"]["notes"]) == 7

    @pytest.mark.asyncio
    async def test_build_scale_unknown(self, harmony_tools) -> None:
        """Unknown scales are errors."""
        data = json.loads(await harmony_tools["theory_build_scale"](tonic="C4", kind="Klingon"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_scale_degree(self, harmony_tools) -> None:
        """Resolve a scale degree."""
        data = json.loads(
            await harmony_tools["theory_scale_degree"](tonic="C4", kind="Major", degree=5)
        )
        assert data["status"] == "success"
        assert data["note"]["name"] == "G4"

    @pytest.mark.asyncio
    async def test_scale_degree_invalid(self, harmony_tools) -> None:
        """Degrees outside the scale are errors."""
        data = json.loads(
            await harmony_tools["theory_scale_degree"](tonic="C4", kind="Major", degree=0)
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_diatonic_chord(self, harmony_tools) -> None:
        """Stack thirds on a scale degree."""
        data = json.loads(
            await harmony_tools["theory_diatonic_chord"](
                tonic="C4", kind="Major", degree=5, size=4
            )
        )
        assert data["status"] == "success"
        assert [n["name"] for n in data["chord"]["notes"]] == ["G4", "B4", "D5", "F5"]

    @pytest.mark.asyncio
    async def test_list_vocabulary(self, harmony_tools) -> None:
        """List built-in and vocabulary tables."""
        data = json.loads(await harmony_tools["theory_list_vocabulary"]())
        assert data["status"] == "success"
        assert data["scales"]["Major"] == [0, 2, 4, 5, 7, 9, 11, 12]
        assert "whole_tone" in data["scales"]
        assert data["chords"]["Dom7"] == [0, 4, 7, 10]
        assert "add9" in data["chords"]
        assert data["intervals"]["P5"] == 7
        assert len(data["intervals"]) == 25

    @pytest.mark.asyncio
    async def test_project_vocabulary(self, mcp, library_path: Path, temp_dir: Path) -> None:
        """Project vocabulary files are picked up by the tools."""
        with open(temp_dir / "project.yaml", "w") as f:
            yaml.dump({"chords": {"quartal": [0, 5, 10]}}, f)
        loader = VocabularyLoader(library_path=library_path, project_path=temp_dir)
        tools = register_harmony_tools(mcp, loader)

        data = json.loads(await tools["theory_chord_from_name"](name="Cquartal"))
        assert data["status"] == "success"
        assert data["chord"]["quality"] == "quartal"
        assert [n["midi"] for n in data["chord"]["notes"]] == [48, 53, 58]
