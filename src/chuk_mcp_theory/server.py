#!/usr/bin/env python3
"""
Entry point for the CHUK Theory MCP Server.

Runs the theory tools over stdio (default) or HTTP. The project
vocabulary directory and the A4 reference pitch can be set with flags
or with the CHUK_THEORY_VOCABULARY_DIR / CHUK_THEORY_REFERENCE_HZ
environment variables.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Theory MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--vocabulary-dir",
        help="Directory of project vocabulary YAML files (default: ./vocabulary)",
    )
    parser.add_argument(
        "--reference",
        type=float,
        help="Frequency of A4 in Hz used in results (default: 440.0)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.vocabulary_dir:
        os.environ["CHUK_THEORY_VOCABULARY_DIR"] = args.vocabulary_dir
    if args.reference is not None:
        if args.reference <= 0:
            raise SystemExit("--reference must be a positive frequency")
        os.environ["CHUK_THEORY_REFERENCE_HZ"] = str(args.reference)

    # The server module reads its configuration at import time
    from chuk_mcp_theory.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Theory MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Theory MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
