"""
Transfer construction, signing, submission and status handlers.

The three-step flow passes base-58 strings between calls:
create_transaction -> serialized Message, sign_transaction -> serialized
Transaction, send_transaction -> signature.
"""

from __future__ import annotations

import logging
from typing import Any

from solana.rpc.commitment import Commitment
from solana.rpc.models import TxOpts
from solders.message import Message
from solders.signature import Signature
from solders.system_program import TransferParams, transfer
from solders.transaction import Transaction

from ..client.keys import decode_bytes, encode_bytes, keypair_from_private_key
from ..helpers import (
  NO_PRIVATE_KEY,
  NO_PUBLIC_KEY,
  ErrorCategory,
  ToolResult,
  create_error_response,
  create_success_response,
  format_balances,
  log_and_format_error,
)
from ..state.types import WalletContext
from ..validation import (
  AddressError,
  opt_bool,
  opt_commitment,
  opt_string,
  req_string,
  validate_address,
  validate_amount,
)

log = logging.getLogger("skill.solana_wallet.handlers.transaction")

# getTransaction does not serve "processed" reads.
STATUS_COMMITMENTS = ("confirmed", "finalized")


def _describe_error(err: Any) -> str:
  # solders error types print their Rust repr; prefer their JSON form.
  to_json = getattr(err, "to_json", None)
  if callable(to_json):
    return to_json()
  text = str(err)
  prefix = f"{type(err).__name__}."
  return text[len(prefix):] if text.startswith(prefix) else text


async def create_transaction(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Build an unsigned SOL transfer message."""
  try:
    from_key = opt_string(args, "from_public_key", strict=True)
    if not from_key and ctx.default_public_key:
      from_key = str(ctx.default_public_key)
    if not from_key:
      return create_error_response(NO_PUBLIC_KEY)
    from_addr = validate_address(from_key)
    if isinstance(from_addr, AddressError):
      return from_addr.response

    to_addr = validate_address(req_string(args, "to_public_key"))
    if isinstance(to_addr, AddressError):
      return to_addr.response

    lamports = validate_amount(args.get("amount"))
    commitment = opt_commitment(args)

    rpc = ctx.rpc
    resp = await rpc.get_latest_blockhash(Commitment(commitment))
    blockhash = resp.value.blockhash

    ix = transfer(
      TransferParams(
        from_pubkey=from_addr.address,
        to_pubkey=to_addr.address,
        lamports=lamports,
      )
    )
    message = Message.new_with_blockhash([ix], from_addr.address, blockhash)
    return create_success_response(f"Transaction message created: {encode_bytes(bytes(message))}")
  except Exception as e:
    return log_and_format_error("create_transaction", "creating transaction", e, ErrorCategory.TX)


async def sign_transaction(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Sign a serialized message with an explicit key or the default wallet."""
  try:
    encoded = req_string(args, "transaction")

    private_key = opt_string(args, "private_key")
    if private_key:
      keypair = keypair_from_private_key(private_key)
    elif ctx.default_keypair is not None:
      keypair = ctx.default_keypair
    else:
      return create_error_response(NO_PRIVATE_KEY)

    message = Message.from_bytes(decode_bytes(encoded))
    tx = Transaction.new_unsigned(message)
    tx.sign([keypair], message.recent_blockhash)
    return create_success_response(f"Transaction signed: {encode_bytes(bytes(tx))}")
  except Exception as e:
    return log_and_format_error("sign_transaction", "signing transaction", e, ErrorCategory.TX)


async def send_transaction(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Submit a signed transaction to the active network or an explicit RPC URL."""
  try:
    tx = Transaction.from_bytes(decode_bytes(req_string(args, "signed_transaction")))
    opts = TxOpts(
      skip_preflight=opt_bool(args, "skip_preflight"),
      preflight_commitment=Commitment(opt_commitment(args)),
    )

    async with ctx.client_for(opt_string(args, "rpc_url")) as rpc:
      resp = await rpc.send_raw_transaction(bytes(tx), opts=opts)
    log.info("Submitted transaction %s", resp.value)
    return create_success_response(f"Transaction sent: {resp.value}")
  except Exception as e:
    return log_and_format_error("send_transaction", "sending transaction", e, ErrorCategory.TX)


async def check_transaction(ctx: WalletContext, args: dict[str, Any]) -> ToolResult:
  """Look up the status of a submitted transaction by signature."""
  try:
    signature = Signature.from_string(req_string(args, "signature"))
    commitment = opt_commitment(args, allowed=STATUS_COMMITMENTS)

    async with ctx.client_for(opt_string(args, "rpc_url")) as rpc:
      resp = await rpc.get_transaction(
        signature,
        commitment=Commitment(commitment),
        max_supported_transaction_version=0,
      )

    found = resp.value
    if found is None:
      return create_error_response("Transaction not found")

    meta = found.transaction.meta
    if meta is None:
      status, fee, pre, post = "Ok", None, None, None
    else:
      status = "Ok" if meta.err is None else f"Error ({_describe_error(meta.err)})"
      fee, pre, post = meta.fee, meta.pre_balances, meta.post_balances

    lines = [
      "Transaction confirmed:",
      f"Slot: {found.slot}",
      f"Block time: {found.block_time}",
      f"Status: {status}",
      f"Fee: {fee}",
      f"Pre balances: {format_balances(pre)}",
      f"Post balances: {format_balances(post)}",
    ]
    return create_success_response("\n".join(lines))
  except Exception as e:
    return log_and_format_error("check_transaction", "checking transaction", e, ErrorCategory.TX)
