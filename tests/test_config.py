from solders.keypair import Keypair

from skills.solana_wallet.client.keys import encode_private_key
from skills.solana_wallet.config import WalletSettings
from skills.solana_wallet.state import store


def test_settings_from_env():
    key = encode_private_key(Keypair())
    settings = WalletSettings.from_env({"PRIVATE_KEY": f"  {key}\n", "LOG_LEVEL": "debug"})
    assert settings.private_key.get_secret_value() == key
    assert settings.log_level == "DEBUG"
    assert key not in repr(settings)


def test_blank_private_key_is_unset():
    settings = WalletSettings.from_env({"PRIVATE_KEY": "   "})
    assert settings.private_key is None
    assert settings.log_level == "INFO"


def test_configure_loads_default_wallet(rpc_factory):
    keypair = Keypair()
    ctx = store.configure(WalletSettings(private_key=encode_private_key(keypair)), rpc_factory=rpc_factory)
    assert ctx.default_public_key == keypair.pubkey()
    assert store.get_context() is ctx


def test_configure_accepts_full_64_byte_key(rpc_factory):
    keypair = Keypair()
    ctx = store.configure(WalletSettings(private_key=str(keypair)), rpc_factory=rpc_factory)
    assert ctx.default_public_key == keypair.pubkey()


def test_malformed_private_key_leaves_wallet_unset(rpc_factory):
    ctx = store.configure(WalletSettings(private_key="not-base58-0OIl"), rpc_factory=rpc_factory)
    assert ctx.default_keypair is None
    assert ctx.default_public_key is None


def test_configure_is_idempotent(rpc_factory):
    first = store.configure(WalletSettings(), rpc_factory=rpc_factory)
    second = store.configure(WalletSettings(private_key=encode_private_key(Keypair())), rpc_factory=rpc_factory)
    assert second is first
    assert second.default_keypair is None
