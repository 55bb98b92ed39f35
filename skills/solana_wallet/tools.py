"""
Tool definitions for the Solana wallet skill.

These tools are exposed to the AI agent over MCP.
"""

from __future__ import annotations

from mcp.types import Tool

_COMMITMENT = {
  "type": "string",
  "enum": ["processed", "confirmed", "finalized"],
  "description": "Commitment level for the query (default: confirmed)",
}

_RPC_URL = {
  "type": "string",
  "description": "RPC endpoint to use instead of the current network's default",
}

ALL_TOOLS: list[Tool] = [
  Tool(
    name="get_balance",
    description="Get the SOL balance of an address (uses the default wallet if no public_key is given)",
    inputSchema={
      "type": "object",
      "properties": {
        "public_key": {
          "type": "string",
          "description": "Address to get the balance for",
        },
        "commitment": _COMMITMENT,
      },
      "required": [],
    },
  ),
  Tool(
    name="get_token_accounts",
    description="List the SPL token accounts owned by an address (uses the default wallet if no public_key is given)",
    inputSchema={
      "type": "object",
      "properties": {
        "public_key": {
          "type": "string",
          "description": "Owner address",
        },
        "commitment": _COMMITMENT,
      },
      "required": [],
    },
  ),
  Tool(
    name="get_token_balance",
    description="Get the balance of a token account",
    inputSchema={
      "type": "object",
      "properties": {
        "token_account_address": {
          "type": "string",
          "description": "Token account address",
        },
        "commitment": _COMMITMENT,
      },
      "required": ["token_account_address"],
    },
  ),
  Tool(
    name="create_transaction",
    description="Create an unsigned SOL transfer message (uses the default wallet if no from_public_key is given)",
    inputSchema={
      "type": "object",
      "properties": {
        "from_public_key": {
          "type": "string",
          "description": "Sender address; also pays the fee",
        },
        "to_public_key": {
          "type": "string",
          "description": "Recipient address",
        },
        "amount": {
          "type": "number",
          "description": "Amount to transfer in lamports (1 SOL = 1_000_000_000 lamports)",
        },
        "commitment": _COMMITMENT,
      },
      "required": ["to_public_key", "amount"],
    },
  ),
  Tool(
    name="sign_transaction",
    description="Sign a transaction message created by create_transaction (uses the default wallet if no private_key is given)",
    inputSchema={
      "type": "object",
      "properties": {
        "transaction": {
          "type": "string",
          "description": "Base-58 encoded transaction message",
        },
        "private_key": {
          "type": "string",
          "description": "Base-58 private key (32-byte seed or 64-byte keypair)",
        },
      },
      "required": ["transaction"],
    },
  ),
  Tool(
    name="send_transaction",
    description="Submit a signed transaction to the network",
    inputSchema={
      "type": "object",
      "properties": {
        "signed_transaction": {
          "type": "string",
          "description": "Base-58 encoded signed transaction",
        },
        "skip_preflight": {
          "type": "boolean",
          "description": "Skip the preflight simulation",
          "default": False,
        },
        "commitment": _COMMITMENT,
        "rpc_url": _RPC_URL,
      },
      "required": ["signed_transaction"],
    },
  ),
  Tool(
    name="generate_keypair",
    description="Generate a new keypair and return its public key and base-58 private key",
    inputSchema={
      "type": "object",
      "properties": {},
      "required": [],
    },
  ),
  Tool(
    name="import_private_key",
    description="Derive the public key for a base-58 private key",
    inputSchema={
      "type": "object",
      "properties": {
        "private_key": {
          "type": "string",
          "description": "Base-58 private key (32-byte seed or 64-byte keypair)",
        },
      },
      "required": ["private_key"],
    },
  ),
  Tool(
    name="validate_address",
    description="Check whether a string is a valid Solana address",
    inputSchema={
      "type": "object",
      "properties": {
        "address": {
          "type": "string",
          "description": "Address to validate",
        },
      },
      "required": ["address"],
    },
  ),
  Tool(
    name="check_transaction",
    description="Get the status of a transaction by signature",
    inputSchema={
      "type": "object",
      "properties": {
        "signature": {
          "type": "string",
          "description": "Transaction signature",
        },
        "commitment": {
          "type": "string",
          "enum": ["confirmed", "finalized"],
          "description": "Commitment level for the query (default: confirmed)",
        },
        "rpc_url": _RPC_URL,
      },
      "required": ["signature"],
    },
  ),
  Tool(
    name="switch_network",
    description="Switch between Solana devnet and mainnet",
    inputSchema={
      "type": "object",
      "properties": {
        "network": {
          "type": "string",
          "enum": ["devnet", "mainnet"],
          "description": "Network to switch to",
        },
      },
      "required": ["network"],
    },
  ),
  Tool(
    name="get_current_network",
    description="Get the network the wallet is currently using",
    inputSchema={
      "type": "object",
      "properties": {},
      "required": [],
    },
  ),
]
