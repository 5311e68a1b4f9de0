"""
Wallet RPC Models
Request and response records mirroring monero-wallet-rpc JSON shapes.
"""

from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum
from typing import Any, Dict, List, get_args, get_origin, get_type_hints


class Priority(IntEnum):
    """Transaction priority accepted by transfer and sweep calls."""

    DEFAULT = 0
    UNIMPORTANT = 1
    NORMAL = 2
    ELEVATED = 3


class GetTransferType(str, Enum):
    """Filter for incoming_transfers."""

    ALL = 'all'                  # all the transfers
    AVAILABLE = 'available'      # only transfers which are not yet spent
    UNAVAILABLE = 'unavailable'  # only transfers which are already spent


class QueryKeyType(str, Enum):
    """Key kinds returned by query_key."""

    MNEMONIC = 'mnemonic'
    VIEW_KEY = 'view_key'
    SPEND_KEY = 'spend_key'


def _omit(default: Any = 0, **kwargs):
    """Field left out of the request body when falsy."""
    return field(default=default, metadata={'omitempty': True, **kwargs})


def _list(**metadata):
    return field(default_factory=list, metadata=metadata)


def encode_value(value: Any) -> Any:
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    return value


def _decode(hint: Any, value: Any) -> Any:
    if get_origin(hint) in (list, List):
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {value!r}")
        (item_hint,) = get_args(hint)
        return [_decode(item_hint, v) for v in value]
    if isinstance(hint, type) and issubclass(hint, Record):
        return hint.from_dict(value)
    if isinstance(hint, type) and issubclass(hint, Enum):
        return hint(value)
    return value


class Record:
    """
    JSON mapping shared by all models.

    Field metadata drives the mapping: 'json' renames a key (used for
    Python keywords such as "in"), 'omitempty' drops falsy values from
    requests. Missing or null keys in responses keep the field default.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON object sent to the wallet."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get('omitempty') and not value:
                continue
            data[f.metadata.get('json', f.name)] = encode_value(value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create from a JSON object returned by the wallet."""
        if not isinstance(data, dict):
            raise TypeError(f"expected an object for {cls.__name__}, got {data!r}")
        hints = get_type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get('json', f.name)
            if data.get(key) is None:
                continue
            kwargs[f.name] = _decode(hints[f.name], data[key])
        return cls(**kwargs)


# ============================================================================
# TRANSFERS
# ============================================================================

@dataclass(frozen=True)
class Destination(Record):
    """Recipient of a transfer."""

    amount: int = 0       # atomic units
    address: str = ''


@dataclass(frozen=True)
class TransferRequest(Record):
    """
    Parameters of transfer and transfer_split.

    fee is ignored by the wallet (it is always calculated) and is only sent
    when set. payment_id is an optional 16 or 64 character hex string.
    """

    destinations: List[Destination] = _list()
    fee: int = _omit()
    mixin: int = 0
    unlock_time: int = 0
    payment_id: str = _omit('')
    get_tx_key: bool = False
    priority: Priority = Priority.DEFAULT
    do_not_relay: bool = _omit(False)
    get_tx_hex: bool = _omit(False)


@dataclass(frozen=True)
class TransferResponse(Record):
    """Result of a transfer."""

    fee: int = 0
    tx_hash: str = ''
    tx_key: str = ''      # only when get_tx_key was set
    tx_blob: str = ''     # only when get_tx_hex was set


@dataclass(frozen=True)
class TransferSplitResponse(Record):
    """Result of transfer_split; one entry per created transaction."""

    fee_list: List[int] = _list()
    amount_list: List[int] = _list()
    tx_hash_list: List[str] = _list()
    tx_key_list: List[str] = _list()
    tx_blob_list: List[str] = _list()


@dataclass(frozen=True)
class SweepAllRequest(Record):
    """Parameters of sweep_all."""

    address: str = ''
    priority: Priority = Priority.DEFAULT
    mixin: int = 0
    unlock_time: int = 0
    payment_id: str = _omit('')
    get_tx_keys: bool = False
    below_amount: int = _omit()
    do_not_relay: bool = _omit(False)
    get_tx_hex: bool = _omit(False)


@dataclass(frozen=True)
class SweepAllResponse(Record):
    """Result of sweep_all."""

    tx_hash_list: List[str] = _list()
    tx_key_list: List[str] = _list()
    tx_blob_list: List[str] = _list()


# ============================================================================
# PAYMENTS AND HISTORY
# ============================================================================

@dataclass(frozen=True)
class Payment(Record):
    """Incoming payment matched by payment id."""

    payment_id: str = ''
    tx_hash: str = ''
    amount: int = 0
    block_height: int = 0
    unlock_time: int = 0


@dataclass(frozen=True)
class GetTransfersRequest(Record):
    """Selects which transfer categories get_transfers returns."""

    in_: bool = field(default=False, metadata={'json': 'in'})
    out: bool = False
    pending: bool = False
    failed: bool = False
    pool: bool = False
    filter_by_height: bool = False
    min_height: int = _omit()
    max_height: int = _omit()


@dataclass(frozen=True)
class Transfer(Record):
    """Entry of the wallet's transfer history."""

    txid: str = ''
    payment_id: str = ''
    height: int = 0
    timestamp: int = 0
    amount: int = 0
    fee: int = 0
    note: str = ''
    destinations: List[Destination] = _list()
    type: str = ''        # in, out, pending, failed or pool


@dataclass(frozen=True)
class GetTransfersResponse(Record):
    """Result of get_transfers, grouped by category."""

    in_: List[Transfer] = _list(json='in')
    out: List[Transfer] = _list()
    pending: List[Transfer] = _list()
    failed: List[Transfer] = _list()
    pool: List[Transfer] = _list()


@dataclass(frozen=True)
class IncomingTransfer(Record):
    """Output received by the wallet (incoming_transfers)."""

    amount: int = 0
    spent: bool = False
    global_index: int = 0
    tx_hash: str = ''
    tx_size: int = 0


# ============================================================================
# URIS, KEY IMAGES, ADDRESS BOOK
# ============================================================================

@dataclass(frozen=True)
class URIDef(Record):
    """Components of a monero: payment URI."""

    address: str = ''
    amount: int = _omit()
    payment_id: str = _omit('')
    tx_description: str = _omit('')
    recipient_name: str = _omit('')


@dataclass(frozen=True)
class SignedKeyImage(Record):
    key_image: str = ''
    signature: str = ''


@dataclass(frozen=True)
class ImportKeyImagesResponse(Record):
    height: int = 0
    spent: int = 0
    unspent: int = 0


@dataclass(frozen=True)
class AddressBookEntry(Record):
    """
    Address book entry.

    index is assigned by the wallet; add_address_book always sends 0.
    """

    address: str = ''
    payment_id: str = ''
    description: str = ''
    index: int = 0
