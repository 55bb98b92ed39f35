"""
In-process store for the wallet context served over MCP.
"""

from __future__ import annotations

import logging

from solders.keypair import Keypair

from ..client.keys import keypair_from_private_key
from ..client.rpc_client import RpcFactory, create_rpc_client
from ..config import WalletSettings
from .types import WalletContext

log = logging.getLogger("skill.solana_wallet.store")

_context: WalletContext | None = None


def load_default_keypair(private_key: str | None) -> Keypair | None:
  """Derive the default wallet, or ``None`` if the key is absent or malformed."""
  if not private_key:
    return None
  try:
    return keypair_from_private_key(private_key)
  except Exception as exc:
    log.error("Error initializing default wallet: %s", exc)
    return None


def configure(
  settings: WalletSettings,
  rpc_factory: RpcFactory = create_rpc_client,
) -> WalletContext:
  """Build the process context once. Later calls return the existing one."""
  global _context
  if _context is not None:
    log.debug("Wallet context already configured, ignoring")
    return _context

  secret = settings.private_key.get_secret_value() if settings.private_key else None
  _context = WalletContext(
    default_keypair=load_default_keypair(secret),
    rpc_factory=rpc_factory,
  )
  return _context


def get_context() -> WalletContext:
  """Return the process context, creating an unconfigured one if needed."""
  global _context
  if _context is None:
    _context = WalletContext()
  return _context


def reset_context() -> None:
  global _context
  _context = None
