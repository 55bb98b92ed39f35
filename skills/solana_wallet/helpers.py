"""
Result envelopes and shared error handling for the Solana wallet skill.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

LAMPORTS_PER_SOL = 1_000_000_000

log = logging.getLogger("skill.solana_wallet.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def create_error_response(message: str) -> ToolResult:
  return ToolResult(content=message, is_error=True)


def create_success_response(message: str) -> ToolResult:
  return ToolResult(content=message, is_error=False)


NO_PUBLIC_KEY = (
  "No public key provided and no default wallet configured. "
  "Set up the PRIVATE_KEY environment variable to use the default wallet."
)
NO_PRIVATE_KEY = (
  "No private key provided and no default wallet configured. "
  "Set up the PRIVATE_KEY environment variable to use the default wallet."
)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def lamports_to_sol(lamports: int) -> str:
  """Render a lamport amount as SOL without float noise, e.g. 1500000000 -> "1.5"."""
  sol = (Decimal(lamports) / LAMPORTS_PER_SOL).normalize()
  return format(sol, "f")


def format_balances(values: list[int] | None) -> str:
  if not values:
    return "-"
  return ", ".join(str(v) for v in values)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  ACCOUNT = "ACCOUNT"
  TX = "TX"
  KEYS = "KEYS"
  NETWORK = "NETWORK"
  VALIDATION = "VALIDATION"


def log_and_format_error(
  function_name: str,
  verb: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  """Log a handler failure and turn it into an error envelope.

  Validation errors carry a user-facing message and are returned as-is.
  Everything else is rendered as ``Error {verb}: {message}``.
  """
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  error_code = f"{prefix}-ERR-{hash_val:03d}"

  from .validation import ValidationError

  if isinstance(error, ValidationError):
    log.info("[SOL] Rejected %s - Code: %s - %s", function_name, error_code, error)
    return create_error_response(str(error))

  log.error("[SOL] Error in %s - Code: %s - %s", function_name, error_code, error)
  return create_error_response(f"Error {verb}: {error}")
