"""
Wallet RPC Configuration
Constants and client configuration for monero-wallet-rpc.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import os

import requests

# ============================================================================
# PROTOCOL
# ============================================================================

# JSON-RPC protocol version tag sent with every request
JSONRPC_VERSION = "2.0"

# Endpoint path served by monero-wallet-rpc
JSONRPC_PATH = "/json_rpc"

# ============================================================================
# NETWORK PORTS
# ============================================================================

# Mainnet
WALLET_RPC_PORT = 18082

# Testnet / stagenet
TESTNET_WALLET_RPC_PORT = 28082
STAGENET_WALLET_RPC_PORT = 38082

DEFAULT_ADDRESS = f"http://127.0.0.1:{WALLET_RPC_PORT}{JSONRPC_PATH}"

# Request timeout (seconds). Sweeps and rescans can take a while.
DEFAULT_TIMEOUT = 120

# ============================================================================
# UNITS
# ============================================================================

COIN_NAME = "Monero"
COIN_TICKER = "XMR"

# Atomic units (piconero) per XMR
DECIMAL_PLACES = 12
ATOMIC_UNITS = 10 ** DECIMAL_PLACES

# Largest value the wallet reports (uint64)
MAX_ATOMIC_UNITS = 2 ** 64 - 1

# ============================================================================
# LOGGING
# ============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ============================================================================
# FILE PATHS
# ============================================================================

CONFIG_FILENAME = "walletrpc.conf"


def get_data_dir() -> str:
    """Get default data directory."""
    import platform

    if platform.system() == 'Windows':
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
        return os.path.join(base, 'walletrpc')
    elif platform.system() == 'Darwin':
        return os.path.expanduser('~/Library/Application Support/walletrpc')
    return os.path.expanduser('~/.walletrpc')


def get_config_file() -> str:
    """Get config file path."""
    return os.path.join(get_data_dir(), CONFIG_FILENAME)


# ============================================================================
# CLIENT CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class Config:
    """
    Configuration of a monero-wallet-rpc client.

    The session is the pluggable transport: mount adapters on it for
    retries, TLS pinning or proxies. When it is None the client builds
    its own.
    """

    address: str = DEFAULT_ADDRESS
    custom_headers: Optional[Dict[str, str]] = field(default=None, hash=False)
    session: Optional[requests.Session] = field(default=None, compare=False, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    # --rpc-login credentials (HTTP digest auth)
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_file(cls, config_file: str = None) -> 'Config':
        """
        Create configuration from a key=value file.

        Recognised keys: rpcaddress, rpcuser, rpcpassword, rpctimeout and
        header.<Name> for custom headers. A missing file gives the defaults.

        Args:
            config_file: Path to config file

        Returns:
            Config instance
        """
        if config_file is None:
            config_file = get_config_file()

        settings = {}
        headers = {}
        try:
            with open(config_file, 'r') as f:
                for line in f:
                    line = line.strip()
                    if '=' in line and not line.startswith('#'):
                        key, value = line.split('=', 1)
                        key, value = key.strip(), value.strip()
                        if key.startswith('header.'):
                            headers[key[len('header.'):]] = value
                        else:
                            settings[key] = value
        except FileNotFoundError:
            pass

        return cls(
            address=settings.get('rpcaddress', DEFAULT_ADDRESS),
            custom_headers=headers or None,
            timeout=float(settings.get('rpctimeout', DEFAULT_TIMEOUT)),
            username=settings.get('rpcuser'),
            password=settings.get('rpcpassword'),
        )
