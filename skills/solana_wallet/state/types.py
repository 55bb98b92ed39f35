"""
Wallet context types.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from ..client.rpc_client import DEFAULT_NETWORK, RPC_URLS, RpcFactory, create_rpc_client


@dataclass
class WalletContext:
  """Everything a handler needs besides its arguments.

  ``rpc`` is rebuilt by ``switch_network``. Handlers read it once per call,
  so a call already in flight keeps talking to the previous network even
  though ``network`` has flipped.
  """

  network: str = DEFAULT_NETWORK
  default_keypair: Keypair | None = None
  rpc_factory: RpcFactory = create_rpc_client
  rpc: Any = field(default=None)
  _retired: list[Any] = field(default_factory=list, init=False, repr=False)

  def __post_init__(self) -> None:
    if self.rpc is None:
      self.rpc = self.rpc_factory(self.endpoint)

  @property
  def endpoint(self) -> str:
    return RPC_URLS[self.network]

  @property
  def default_public_key(self) -> Pubkey | None:
    return self.default_keypair.pubkey() if self.default_keypair else None

  def switch_network(self, network: str) -> None:
    # In-flight calls may still hold the old client; it is closed in close().
    self._retired.append(self.rpc)
    self.network = network
    self.rpc = self.rpc_factory(RPC_URLS[network])

  @asynccontextmanager
  async def client_for(self, rpc_url: str | None) -> AsyncIterator[Any]:
    """Yield the active client, or a short-lived one for an explicit URL."""
    if not rpc_url:
      yield self.rpc
      return
    client = self.rpc_factory(rpc_url)
    try:
      yield client
    finally:
      await client.close()

  async def close(self) -> None:
    """Close the active client and every client retired by a switch."""
    clients, self._retired = [*self._retired, self.rpc], []
    for client in clients:
      if client is not None:
        await client.close()
