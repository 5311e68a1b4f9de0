"""
Wallet RPC Utilities
Payment id generation and atomic unit conversion.
"""

import re
import secrets

from .config import ATOMIC_UNITS, DECIMAL_PLACES, MAX_ATOMIC_UNITS

_DECIMAL_RE = re.compile(r'^(\d*)(?:\.(\d*))?$')


def new_payment_id64() -> str:
    """
    Generate a 64 bit payment id (hex encoded).

    With 64 bit ids there is a non-negligible chance of a collision when
    they are generated at random: around 5.06 billion ids give a 50%
    chance of one. Recipients generating them should check for uniqueness.

    Returns:
        16 character hex string
    """
    return secrets.token_hex(8)


def new_payment_id256() -> str:
    """
    Generate a 256 bit payment id (hex encoded).

    Returns:
        64 character hex string
    """
    return secrets.token_hex(32)


def _check_atomic(xmr: int):
    if xmr < 0 or xmr > MAX_ATOMIC_UNITS:
        raise ValueError(f"Atomic amount out of range: {xmr}")


def xmr_to_decimal(xmr: int) -> str:
    """
    Convert atomic units to a fixed-point XMR string.

    Exact: the digits are split on a zero-padded decimal representation,
    never through float.

    Args:
        xmr: Amount in atomic units

    Returns:
        Decimal string with 12 fractional digits, e.g. "0.034000200000"
    """
    _check_atomic(xmr)
    digits = f"{xmr:0{DECIMAL_PLACES + 1}d}"
    return f"{digits[:-DECIMAL_PLACES]}.{digits[-DECIMAL_PLACES:]}"


def xmr_to_float(xmr: int) -> float:
    """Convert atomic units to an approximate XMR float."""
    _check_atomic(xmr)
    return xmr / 1e12


def decimal_to_xmr(amount: str) -> int:
    """
    Parse a decimal XMR string into atomic units.

    Args:
        amount: Amount such as "1.5" or "0.000000000001"

    Returns:
        Amount in atomic units

    Raises:
        ValueError: Malformed amount or more than 12 fractional digits
    """
    match = _DECIMAL_RE.match(amount.strip())
    if not match or not (match.group(1) or match.group(2)):
        raise ValueError(f"Invalid amount: {amount!r}")

    whole, frac = match.group(1) or '0', match.group(2) or ''
    if len(frac) > DECIMAL_PLACES:
        raise ValueError(f"Too many decimal places: {amount!r}")

    xmr = int(whole) * ATOMIC_UNITS + int(frac.ljust(DECIMAL_PLACES, '0'))
    _check_atomic(xmr)
    return xmr
