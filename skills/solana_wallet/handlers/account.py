"""
Balance and token account handlers.
"""

from __future__ import annotations

from typing import Any

from solana.rpc.commitment import Commitment
from solana.rpc.models import TokenAccountOpts

from ..client.rpc_client import TOKEN_PROGRAM_ID
from ..helpers import (
  NO_PUBLIC_KEY,
  ErrorCategory,
  ToolResult,
  create_error_response,
  create_success_response,
  lamports_to_sol,
  log_and_format_error,
)
from ..state.types import WalletContext
from ..validation import AddressError, opt_commitment, opt_string, req_string, validate_address


def _owner(ctx: WalletContext, args: dict[str, Any]) -> str | None:
  explicit = opt_string(args, "public_key", strict=True)
  if explicit:
    return explicit
  default = ctx.default_public_key
  return str(default) if default else None


async def get_balance(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Get the SOL balance of an address, falling back to the default wallet."""
  try:
    public_key = _owner(ctx, args)
    if not public_key:
      return create_error_response(NO_PUBLIC_KEY)
    addr = validate_address(public_key)
    if isinstance(addr, AddressError):
      return addr.response
    commitment = opt_commitment(args)

    rpc = ctx.rpc
    resp = await rpc.get_balance(addr.address, commitment=Commitment(commitment))
    lamports = resp.value
    return create_success_response(
      f"Balance: {lamports} lamports ({lamports_to_sol(lamports)} SOL)."
    )
  except Exception as e:
    return log_and_format_error("get_balance", "getting balance", e, ErrorCategory.ACCOUNT)


async def get_token_accounts(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """List SPL token accounts owned by an address."""
  try:
    public_key = _owner(ctx, args)
    if not public_key:
      return create_error_response(NO_PUBLIC_KEY)
    addr = validate_address(public_key)
    if isinstance(addr, AddressError):
      return addr.response
    commitment = opt_commitment(args)

    rpc = ctx.rpc
    resp = await rpc.get_token_accounts_by_owner(
      addr.address,
      TokenAccountOpts(program_id=TOKEN_PROGRAM_ID),
      commitment=Commitment(commitment),
    )
    lines = ["Token accounts:"]
    lines.extend(str(account.pubkey) for account in resp.value)
    return create_success_response("\n".join(lines))
  except Exception as e:
    return log_and_format_error(
      "get_token_accounts", "getting token accounts", e, ErrorCategory.ACCOUNT
    )


async def get_token_balance(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Get the balance held by a single token account."""
  try:
    addr = validate_address(req_string(args, "token_account_address"))
    if isinstance(addr, AddressError):
      return addr.response
    commitment = opt_commitment(args)

    rpc = ctx.rpc
    resp = await rpc.get_token_account_balance(addr.address, commitment=Commitment(commitment))
    amount = resp.value
    return create_success_response(
      f"Token balance: {amount.ui_amount} {amount.ui_amount_string}"
    )
  except Exception as e:
    return log_and_format_error(
      "get_token_balance", "getting token balance", e, ErrorCategory.ACCOUNT
    )
