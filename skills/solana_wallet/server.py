"""
MCP server + skill lifecycle hooks.

Uses the official `mcp` Python SDK. Handles tools/list, tools/call,
and skill lifecycle (load, unload).
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from .config import WalletSettings
from .handlers import dispatch_tool
from .state import store
from .tools import ALL_TOOLS

log = logging.getLogger("skill.solana_wallet.server")


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server("solana-wallet-skill")

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    args = arguments or {}
    result = await dispatch_tool(name, args)
    return [TextContent(type="text", text=result.content)]

  return server


async def on_skill_load(settings: WalletSettings) -> None:
  """Called at startup. Builds the wallet context and the default wallet."""
  ctx = store.configure(settings)
  if ctx.default_public_key:
    log.info("Default wallet loaded: %s", ctx.default_public_key)
  else:
    log.info("No default wallet configured, tools will require explicit keys")
  log.info("Using %s network (%s)", ctx.network, ctx.endpoint)


async def on_skill_unload() -> None:
  """Called on shutdown. Closes the active RPC client."""
  ctx = store.get_context()
  try:
    await ctx.close()
  except Exception as exc:
    log.warning("Failed to close RPC client: %s", exc)
  store.reset_context()
  log.info("Solana wallet skill unloaded")
