"""
Solana RPC endpoints and client construction.

The RPC client itself is solana-py's ``AsyncClient``; this module only
knows which endpoint each network maps to.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey

log = logging.getLogger("skill.solana_wallet.client")

RPC_URLS: dict[str, str] = {
  "devnet": "https://api.devnet.solana.com",
  "mainnet": "https://api.mainnet-beta.solana.com",
}

DEFAULT_NETWORK = "devnet"

TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")

RpcFactory = Callable[[str], Any]


def create_rpc_client(endpoint: str) -> AsyncClient:
  """Build an ``AsyncClient`` bound to an endpoint."""
  log.debug("Creating RPC client for %s", endpoint)
  return AsyncClient(endpoint)
