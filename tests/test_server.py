"""
Tests for the server entry point options.
"""

import pytest

from chuk_mcp_theory.server import build_parser


class TestServerOptions:
    """Tests for command-line parsing."""

    def test_defaults(self) -> None:
        """stdio transport with no overrides."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.vocabulary_dir is None
        assert args.reference is None
        assert args.debug is False

    def test_http_with_overrides(self) -> None:
        """All options parse."""
        args = build_parser().parse_args(
            [
                "--transport",
                "http",
                "--port",
                "9000",
                "--vocabulary-dir",
                "voc",
                "--reference",
                "432",
                "--debug",
            ]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.vocabulary_dir == "voc"
        assert args.reference == 432.0
        assert args.debug is True

    def test_unknown_transport(self) -> None:
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "sse"])
