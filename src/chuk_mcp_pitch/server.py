#!/usr/bin/env python3
"""
Entry point for the CHUK Pitch MCP Server.

Picks a transport (stdio or http) and starts the server defined in
async_server. The pitch core itself needs no configuration; only the
transport and log level are chosen here.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the server entry point."""
    parser = argparse.ArgumentParser(description="CHUK Pitch MCP Server")
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
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the server on the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Deferred so that --help works without building the server
    from chuk_mcp_pitch.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Pitch MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Pitch MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
