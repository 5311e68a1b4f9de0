"""
Wallet RPC Module
JSON-RPC client for monero-wallet-rpc.
"""

from .config import Config
from .client import WalletClient, AsyncWalletClient
from .methods import WalletMethods
from .errors import (
    ErrorCode,
    WalletRPCError,
    TransportError,
    WalletError,
    get_wallet_error,
    is_wallet_error,
)
from .models import (
    Priority,
    GetTransferType,
    QueryKeyType,
    Destination,
    TransferRequest,
    TransferResponse,
    TransferSplitResponse,
    SweepAllRequest,
    SweepAllResponse,
    Payment,
    GetTransfersRequest,
    GetTransfersResponse,
    Transfer,
    IncomingTransfer,
    URIDef,
    SignedKeyImage,
    ImportKeyImagesResponse,
    AddressBookEntry,
)
from .util import (
    new_payment_id64,
    new_payment_id256,
    xmr_to_decimal,
    xmr_to_float,
    decimal_to_xmr,
)

__all__ = [
    'Config',
    'WalletClient',
    'AsyncWalletClient',
    'WalletMethods',
    'ErrorCode',
    'WalletRPCError',
    'TransportError',
    'WalletError',
    'get_wallet_error',
    'is_wallet_error',
    'Priority',
    'GetTransferType',
    'QueryKeyType',
    'Destination',
    'TransferRequest',
    'TransferResponse',
    'TransferSplitResponse',
    'SweepAllRequest',
    'SweepAllResponse',
    'Payment',
    'GetTransfersRequest',
    'GetTransfersResponse',
    'Transfer',
    'IncomingTransfer',
    'URIDef',
    'SignedKeyImage',
    'ImportKeyImagesResponse',
    'AddressBookEntry',
    'new_payment_id64',
    'new_payment_id256',
    'xmr_to_decimal',
    'xmr_to_float',
    'decimal_to_xmr',
]
