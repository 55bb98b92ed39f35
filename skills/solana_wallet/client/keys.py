"""
Keypair helpers on top of solders.

Private keys travel as base-58 text, either a 32-byte seed or the
64-byte seed + public key form that solders' ``Keypair`` stores.
"""

from __future__ import annotations

import base58
from solders.keypair import Keypair

from ..validation import InvalidKeyLength

SEED_LENGTH = 32
KEYPAIR_LENGTH = 64


def keypair_from_private_key(private_key: str) -> Keypair:
  """Decode a base-58 private key into a full ``Keypair``."""
  raw = base58.b58decode(private_key)

  if len(raw) == KEYPAIR_LENGTH:
    try:
      return Keypair.from_bytes(raw)
    except Exception as exc:
      raise InvalidKeyLength() from exc

  if len(raw) == SEED_LENGTH:
    pubkey = Keypair.from_seed(raw).pubkey()
    try:
      return Keypair.from_bytes(raw + bytes(pubkey))
    except Exception as exc:
      raise InvalidKeyLength() from exc

  raise InvalidKeyLength()


def generate_keypair() -> Keypair:
  return Keypair()


def encode_private_key(keypair: Keypair) -> str:
  """Base-58 encode the 32-byte seed half of a keypair."""
  return base58.b58encode(bytes(keypair)[:SEED_LENGTH]).decode()


def encode_bytes(data: bytes) -> str:
  return base58.b58encode(data).decode()


def decode_bytes(data: str) -> bytes:
  return base58.b58decode(data)
