"""
Input validation helpers for wallet tool arguments.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from solders.pubkey import Pubkey

from .helpers import ToolResult, create_error_response

COMMITMENTS = ("processed", "confirmed", "finalized")
NETWORKS = ("devnet", "mainnet")

INVALID_AMOUNT_INTEGER = (
  "Invalid amount. Amount must be an integer number representing "
  "the amount of lamports to transfer."
)
INVALID_AMOUNT_POSITIVE = "Invalid amount. Amount must be greater than zero."
INVALID_NETWORK = 'Invalid network. Must be "devnet" or "mainnet".'


class ValidationError(Exception):
  """Raised when a tool argument is rejected before any external call."""

  pass


class InvalidKeyLength(ValidationError):
  def __init__(self, message: str = "Invalid private key. Private key must be 32 or 64 bytes long."):
    super().__init__(message)


# ---------------------------------------------------------------------------
# Argument readers
# ---------------------------------------------------------------------------


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v:
    raise ValidationError(f"Missing required parameter: {key}")
  return v


def opt_string(args: dict[str, Any], key: str, strict: bool = False) -> str | None:
  """Read an optional string from args. Empty strings count as absent.

  With ``strict``, a value that is present but not a string is rejected
  instead of being treated as absent.
  """
  v = args.get(key)
  if strict and v is not None and not isinstance(v, str):
    raise ValidationError(f"Invalid parameter: {key} must be a string")
  return v if isinstance(v, str) and v else None


def opt_bool(args: dict[str, Any], key: str, default: bool = False) -> bool:
  v = args.get(key)
  if v is None:
    return default
  if isinstance(v, bool):
    return v
  if isinstance(v, str):
    return v.lower() in ("true", "1", "yes", "on")
  return bool(v)


def opt_commitment(
  args: dict[str, Any],
  key: str = "commitment",
  allowed: tuple[str, ...] = COMMITMENTS,
  default: str = "confirmed",
) -> str:
  """Read an optional commitment level, defaulting to ``confirmed``."""
  v = args.get(key)
  if v is None or v == "":
    return default
  if v not in allowed:
    raise ValidationError(f"Invalid commitment: {v}. Must be one of {', '.join(allowed)}.")
  return v


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressOk:
  address: Pubkey


@dataclass(frozen=True)
class AddressError:
  response: ToolResult


AddressResult = AddressOk | AddressError


def validate_address(address: str) -> AddressResult:
  """Parse a base-58 account address.

  Callers branch on the variant: ``AddressOk`` carries the parsed key,
  ``AddressError`` carries the envelope to hand back unchanged.
  """
  try:
    return AddressOk(Pubkey.from_string(address))
  except (ValueError, TypeError):
    return AddressError(create_error_response(f"Invalid address: {address}"))


# ---------------------------------------------------------------------------
# Amounts & networks
# ---------------------------------------------------------------------------


def validate_amount(value: Any) -> int:
  """Coerce a transfer amount to a positive number of lamports."""
  if isinstance(value, bool):
    raise ValidationError(INVALID_AMOUNT_INTEGER)
  if isinstance(value, int):
    lamports = value
  elif isinstance(value, float):
    if not math.isfinite(value) or not value.is_integer():
      raise ValidationError(INVALID_AMOUNT_INTEGER)
    lamports = int(value)
  elif isinstance(value, str):
    try:
      lamports = int(value.strip())
    except ValueError:
      raise ValidationError(INVALID_AMOUNT_INTEGER) from None
  else:
    raise ValidationError(INVALID_AMOUNT_INTEGER)

  if lamports <= 0:
    raise ValidationError(INVALID_AMOUNT_POSITIVE)
  return lamports


def validate_network(value: Any) -> str:
  if value not in NETWORKS:
    raise ValidationError(INVALID_NETWORK)
  return value
