#!/usr/bin/env python3
"""
Entry point for the theory quiz MCP server.

Serves the theory and quiz tools over stdio (the default, for MCP clients
that spawn the server) or http.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http")


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="Music theory quiz MCP server")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
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


def run(transport: str, port: int) -> None:
    """Start serving on the chosen transport. Blocks until the server stops."""
    # Importing the server registers every tool
    from chuk_mcp_theory_quiz.async_server import mcp

    if transport == "http":
        logger.info(f"Serving theory quiz tools over http on port {port}")
        asyncio.run(mcp.run_http(port=port))
    else:
        logger.info("Serving theory quiz tools over stdio")
        asyncio.run(mcp.run_stdio())


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    run(args.transport, args.port)


if __name__ == "__main__":
    main()
