"""
Environment-derived settings for the Solana wallet skill.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class WalletSettings(BaseModel):
  """Startup configuration read once from the process environment."""

  model_config = ConfigDict(frozen=True)

  private_key: SecretStr | None = Field(
    default=None,
    description="Base-58 private key (32-byte seed or 64-byte keypair) of the default wallet",
  )
  log_level: str = Field(default="INFO", description="Root log level for the skill process")

  @field_validator("private_key", mode="before")
  @classmethod
  def _blank_key_is_unset(cls, v: object) -> object:
    if isinstance(v, str) and not v.strip():
      return None
    return v.strip() if isinstance(v, str) else v

  @field_validator("log_level")
  @classmethod
  def _upper_level(cls, v: str) -> str:
    return v.strip().upper() or "INFO"

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> WalletSettings:
    env = os.environ if environ is None else environ
    return cls(
      private_key=env.get("PRIVATE_KEY"),
      log_level=env.get("LOG_LEVEL", "INFO"),
    )
