"""
Keypair and address handlers. None of these touch the network.
"""

from __future__ import annotations

from typing import Any

from ..client.keys import encode_private_key, generate_keypair as new_keypair, keypair_from_private_key
from ..helpers import ErrorCategory, ToolResult, create_success_response, log_and_format_error
from ..state.types import WalletContext
from ..validation import AddressError, req_string, validate_address as parse_address


async def generate_keypair(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  try:
    keypair = new_keypair()
    return create_success_response(
      f"Public key: {keypair.pubkey()}\nPrivate key: {encode_private_key(keypair)}"
    )
  except Exception as e:
    return log_and_format_error("generate_keypair", "generating keypair", e, ErrorCategory.KEYS)


async def import_private_key(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Derive the public key for a base-58 private key."""
  try:
    keypair = keypair_from_private_key(req_string(args, "private_key"))
    return create_success_response(f"Public key: {keypair.pubkey()}")
  except Exception as e:
    return log_and_format_error(
      "import_private_key", "importing private key", e, ErrorCategory.KEYS
    )


async def validate_address(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  try:
    address = req_string(args, "address")
    result = parse_address(address)
    if isinstance(result, AddressError):
      return result.response
    return create_success_response(f"Address is valid: {address}")
  except Exception as e:
    return log_and_format_error(
      "validate_address", "validating address", e, ErrorCategory.VALIDATION
    )
