"""
Solana wallet skill entry point: starts the MCP server.

Run with: python -m skills.solana_wallet
"""

from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from .config import WalletSettings
from .server import create_mcp_server, on_skill_load, on_skill_unload

log = logging.getLogger("skill.solana_wallet")


async def main(settings: WalletSettings) -> None:
  """Start the MCP server."""
  await on_skill_load(settings)
  server = create_mcp_server()
  try:
    async with stdio_server() as (read_stream, write_stream):
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await on_skill_unload()


if __name__ == "__main__":
  settings = WalletSettings.from_env()
  logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
  )
  asyncio.run(main(settings))
