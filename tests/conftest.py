import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, List, Tuple

import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.signature import Signature

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from skills.solana_wallet.state import store  # noqa: E402
from skills.solana_wallet.state.types import WalletContext  # noqa: E402


class FakeRpc:
    """
    Stand-in for solana-py's AsyncClient. Every call is recorded; responses
    mimic the `.value` shape of the real response objects.
    """

    def __init__(self, endpoint: str, **preset: Any):
        self.endpoint = endpoint
        self.calls: List[Tuple[str, tuple, dict]] = []
        self.closed = False
        self.error: Exception | None = None
        self.balance = 0
        self.token_accounts: List[str] = []
        self.token_amount = SimpleNamespace(ui_amount=None, ui_amount_string="0")
        self.blockhash = Hash.default()
        self.sent_signature = Signature.default()
        self.transaction: Any = None
        for key, value in preset.items():
            setattr(self, key, value)

    def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error

    async def get_balance(self, pubkey, commitment=None):
        self._record("get_balance", pubkey, commitment=commitment)
        return SimpleNamespace(value=self.balance)

    async def get_token_accounts_by_owner(self, owner, opts, commitment=None):
        self._record("get_token_accounts_by_owner", owner, opts, commitment=commitment)
        return SimpleNamespace(value=[SimpleNamespace(pubkey=a) for a in self.token_accounts])

    async def get_token_account_balance(self, pubkey, commitment=None):
        self._record("get_token_account_balance", pubkey, commitment=commitment)
        return SimpleNamespace(value=self.token_amount)

    async def get_latest_blockhash(self, commitment=None):
        self._record("get_latest_blockhash", commitment=commitment)
        return SimpleNamespace(value=SimpleNamespace(blockhash=self.blockhash, last_valid_block_height=100))

    async def send_raw_transaction(self, txn, opts=None):
        self._record("send_raw_transaction", txn, opts=opts)
        return SimpleNamespace(value=self.sent_signature)

    async def get_transaction(self, tx_sig, commitment=None, max_supported_transaction_version=None):
        self._record(
            "get_transaction",
            tx_sig,
            commitment=commitment,
            max_supported_transaction_version=max_supported_transaction_version,
        )
        return SimpleNamespace(value=self.transaction)

    async def close(self):
        self.closed = True


class FakeRpcFactory:
    """Builds FakeRpc clients and remembers every one it made."""

    def __init__(self, **preset: Any):
        self.preset = preset
        self.clients: List[FakeRpc] = []

    def __call__(self, endpoint: str) -> FakeRpc:
        client = FakeRpc(endpoint, **self.preset)
        self.clients.append(client)
        return client

    @property
    def endpoints(self) -> List[str]:
        return [c.endpoint for c in self.clients]


@pytest.fixture(autouse=True)
def reset_store():
    store.reset_context()
    yield
    store.reset_context()


@pytest.fixture
def rpc_factory() -> FakeRpcFactory:
    return FakeRpcFactory()


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def ctx(rpc_factory) -> WalletContext:
    """Context with no default wallet."""
    return WalletContext(rpc_factory=rpc_factory)


@pytest.fixture
def wallet_ctx(rpc_factory, keypair) -> WalletContext:
    """Context whose default wallet is `keypair`."""
    return WalletContext(default_keypair=keypair, rpc_factory=rpc_factory)
