"""
Wallet RPC Errors
Transport failures and structured monero-wallet-rpc errors.
"""

from enum import IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """
    monero-wallet-rpc error codes.

    Mirrors wallet_rpc_server_error_codes.h of the wallet daemon.
    """

    UNKNOWN = -1
    WRONG_ADDRESS = -2
    DAEMON_IS_BUSY = -3
    GENERIC_TRANSFER_ERROR = -4
    WRONG_PAYMENT_ID = -5
    TRANSFER_TYPE = -6
    DENIED = -7
    WRONG_TXID = -8
    WRONG_SIGNATURE = -9
    WRONG_KEY_IMAGE = -10
    WRONG_URI = -11
    WRONG_INDEX = -12
    NOT_OPEN = -13


class WalletRPCError(Exception):
    """Base class for every error raised by the wallet RPC client."""
    pass


class TransportError(WalletRPCError):
    """
    HTTP or network failure, or an unusable response envelope.

    Carries no remote semantics. status_code is the HTTP status when the
    server answered at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class WalletError(WalletRPCError):
    """JSON-RPC error object returned by monero-wallet-rpc."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

    @property
    def error_code(self) -> Optional[ErrorCode]:
        """Known ErrorCode for this error, or None for codes outside the table."""
        try:
            return ErrorCode(self.code)
        except ValueError:
            return None

    def __repr__(self):
        return f"WalletError(code={self.code}, message={self.message!r})"


def get_wallet_error(err: Optional[BaseException]) -> Optional[WalletError]:
    """
    Extract the wallet error behind an exception.

    Follows the __cause__ chain so wallet errors re-raised by callers
    are still found.

    Args:
        err: Any exception (or None)

    Returns:
        WalletError, or None if the error did not come from a JSON-RPC
        error object
    """
    seen = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, WalletError):
            return err
        seen.add(id(err))
        err = err.__cause__
    return None


def is_wallet_error(err: Optional[BaseException]) -> bool:
    """Check whether an exception originated from a JSON-RPC error object."""
    return get_wallet_error(err) is not None
