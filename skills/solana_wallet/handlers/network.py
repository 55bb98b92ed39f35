"""
Network selection handlers.
"""

from __future__ import annotations

import logging
from typing import Any

from ..helpers import ErrorCategory, ToolResult, create_success_response, log_and_format_error
from ..state.types import WalletContext
from ..validation import validate_network

log = logging.getLogger("skill.solana_wallet.handlers.network")


async def switch_network(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Point the context at another cluster and rebuild its RPC client."""
  try:
    network = validate_network(args.get("network"))
    ctx.switch_network(network)
    log.info("Switched to %s network (%s)", network, ctx.endpoint)
    return create_success_response(f"Successfully switched to {network} network.")
  except Exception as e:
    return log_and_format_error("switch_network", "switching network", e, ErrorCategory.NETWORK)


async def get_current_network(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  try:
    return create_success_response(f"Current network is {ctx.network}.")
  except Exception as e:
    return log_and_format_error(
      "get_current_network", "getting current network", e, ErrorCategory.NETWORK
    )
