"""
Tool handler dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..helpers import ToolResult
from ..state import store
from ..state.types import WalletContext
from .account import get_balance, get_token_accounts, get_token_balance
from .keys import generate_keypair, import_private_key, validate_address
from .network import get_current_network, switch_network
from .transaction import check_transaction, create_transaction, send_transaction, sign_transaction

log = logging.getLogger("skill.solana_wallet.handlers")

Handler = Callable[[WalletContext, dict[str, Any]], Awaitable[ToolResult]]

# tool name -> (handler, verb used in "Error {verb}: ..." messages)
HANDLERS: dict[str, tuple[Handler, str]] = {
  # Account
  "get_balance": (get_balance, "getting balance"),
  "get_token_accounts": (get_token_accounts, "getting token accounts"),
  "get_token_balance": (get_token_balance, "getting token balance"),
  # Transactions
  "create_transaction": (create_transaction, "creating transaction"),
  "sign_transaction": (sign_transaction, "signing transaction"),
  "send_transaction": (send_transaction, "sending transaction"),
  "check_transaction": (check_transaction, "checking transaction"),
  # Keys
  "generate_keypair": (generate_keypair, "generating keypair"),
  "import_private_key": (import_private_key, "importing private key"),
  "validate_address": (validate_address, "validating address"),
  # Network
  "switch_network": (switch_network, "switching network"),
  "get_current_network": (get_current_network, "getting current network"),
}


async def dispatch_tool(
  tool_name: str,
  args: dict[str, Any],
  ctx: WalletContext | None = None,
) -> ToolResult:
  """Dispatch a tool call to its handler against the given (or process) context."""
  entry = HANDLERS.get(tool_name)
  if not entry:
    return ToolResult(
      content=f"Unknown tool: {tool_name}",
      is_error=True,
    )
  handler, verb = entry
  try:
    return await handler(ctx if ctx is not None else store.get_context(), args)
  except Exception as e:
    log.exception("Tool execution failed: %s", tool_name)
    return ToolResult(
      content=f"Error {verb}: {e!s}",
      is_error=True,
    )
