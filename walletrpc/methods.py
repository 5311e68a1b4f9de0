"""
Wallet RPC Methods
The monero-wallet-rpc method surface.

Every method builds its params, names the remote procedure and says how
to turn the result object into its return value. The transport lives in
_invoke, so the same surface serves the blocking and the asyncio client:
with WalletClient the methods return values, with AsyncWalletClient they
return awaitables.
"""

from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import (
    AddressBookEntry,
    GetTransfersRequest,
    GetTransfersResponse,
    GetTransferType,
    ImportKeyImagesResponse,
    IncomingTransfer,
    Payment,
    QueryKeyType,
    SignedKeyImage,
    SweepAllRequest,
    SweepAllResponse,
    Transfer,
    TransferRequest,
    TransferResponse,
    TransferSplitResponse,
    URIDef,
)

Decoder = Callable[[Dict[str, Any]], Any]


def _field(key: str, default: Any = None) -> Decoder:
    """Decode a single member of the result object."""
    def decode(result):
        value = result.get(key)
        return default if value is None else value
    return decode


def _records(key: str, record) -> Decoder:
    """Decode a list member of the result object into records."""
    def decode(result):
        return [record.from_dict(item) for item in result.get(key) or []]
    return decode


class WalletMethods:
    """
    monero-wallet-rpc methods.

    Subclasses provide _invoke(method, params, decode). A decode of None
    marks a call without a return value: the response is still parsed so
    a wallet error is raised.
    """

    def _invoke(self, method: str, params: Any = None,
                decode: Optional[Decoder] = None):
        raise NotImplementedError

    # === Wallet state ===

    def get_balance(self) -> Tuple[int, int]:
        """
        Return the wallet's balance.

        Returns:
            (balance, unlocked_balance) in atomic units
        """
        return self._invoke(
            'getbalance',
            decode=lambda r: (r.get('balance') or 0, r.get('unlocked_balance') or 0),
        )

    def get_address(self) -> str:
        """Return the wallet's 95-character address."""
        return self._invoke('getaddress', decode=_field('address', ''))

    def get_height(self) -> int:
        """
        Return the wallet's current block height.

        If the wallet has been offline for a long time it may need to
        catch up with the daemon.
        """
        return self._invoke('getheight', decode=_field('height', 0))

    # === Sending ===

    def transfer(self, req: TransferRequest) -> TransferResponse:
        """Send monero to a number of recipients."""
        return self._invoke('transfer', req, TransferResponse.from_dict)

    def transfer_split(self, req: TransferRequest) -> TransferSplitResponse:
        """Same as transfer, but may split the payment into several transactions."""
        return self._invoke('transfer_split', req, TransferSplitResponse.from_dict)

    def sweep_dust(self) -> List[str]:
        """
        Send all dust outputs back to the wallet, to make them easier to spend.

        Returns:
            Hashes of the created transactions
        """
        return self._invoke('sweep_dust', decode=_field('tx_hash_list', []))

    def sweep_all(self, req: SweepAllRequest) -> SweepAllResponse:
        """Send all unlocked balance to an address."""
        return self._invoke('sweep_all', req, SweepAllResponse.from_dict)

    def store(self):
        """Save the blockchain."""
        return self._invoke('store')

    # === Payments and history ===

    def get_payments(self, payment_id: str) -> List[Payment]:
        """Get a list of incoming payments using a given payment id."""
        return self._invoke(
            'get_payments',
            {'payment_id': payment_id},
            _records('payments', Payment),
        )

    def get_bulk_payments(self, payment_ids: List[str],
                          min_block_height: int) -> List[Payment]:
        """
        Get a list of incoming payments using given payment ids.

        Args:
            payment_ids: Payment ids to look up
            min_block_height: Only payments at or above this height
        """
        return self._invoke(
            'get_bulk_payments',
            {'payment_ids': list(payment_ids), 'min_block_height': min_block_height},
            _records('payments', Payment),
        )

    def get_transfers(self, req: GetTransfersRequest) -> GetTransfersResponse:
        """Return a list of transfers, grouped by the selected categories."""
        return self._invoke('get_transfers', req, GetTransfersResponse.from_dict)

    def get_transfer_by_txid(self, txid: str) -> Transfer:
        """Show information about a transfer to/from this address."""
        return self._invoke(
            'get_transfer_by_txid',
            {'txid': txid},
            lambda r: Transfer.from_dict(r.get('transfer') or {}),
        )

    def incoming_transfers(self, transfer_type: GetTransferType) -> List[IncomingTransfer]:
        """Return a list of incoming transfers to the wallet."""
        return self._invoke(
            'incoming_transfers',
            {'transfer_type': transfer_type},
            _records('transfers', IncomingTransfer),
        )

    # === Keys and addresses ===

    def query_key(self, key_type: QueryKeyType) -> str:
        """Return the spend key, view key or mnemonic seed."""
        return self._invoke('query_key', {'key_type': key_type}, _field('key', ''))

    def make_integrated_address(self, payment_id: str = '') -> str:
        """
        Make an integrated address from the wallet address and a payment id.

        An empty payment_id lets the wallet pick a random one.
        """
        return self._invoke(
            'make_integrated_address',
            {'payment_id': payment_id},
            _field('integrated_address', ''),
        )

    def split_integrated_address(self, integrated_address: str) -> Tuple[str, str]:
        """
        Retrieve the standard address and payment id of an integrated address.

        Returns:
            (payment_id, standard_address)
        """
        return self._invoke(
            'split_integrated_address',
            {'integrated_address': integrated_address},
            lambda r: (r.get('payment_id') or '', r.get('standard_address') or ''),
        )

    def stop_wallet(self):
        """Stop the wallet, storing the current state."""
        return self._invoke('stop_wallet')

    # === URIs ===

    def make_uri(self, req: URIDef) -> str:
        """Create a monero: payment URI."""
        return self._invoke('make_uri', req, _field('uri', ''))

    def parse_uri(self, uri: str) -> URIDef:
        """Parse a payment URI to get payment information."""
        return self._invoke(
            'parse_uri',
            {'uri': uri},
            lambda r: URIDef.from_dict(r.get('uri') or {}),
        )

    def rescan_blockchain(self):
        """Rescan the blockchain from scratch."""
        return self._invoke('rescan_blockchain')

    # === Notes and signatures ===

    def set_tx_notes(self, txids: List[str], notes: List[str]):
        """Set arbitrary string notes for transactions."""
        return self._invoke('set_tx_notes', {'txids': list(txids), 'notes': list(notes)})

    def get_tx_notes(self, txids: List[str]) -> List[str]:
        """Get string notes for transactions."""
        return self._invoke('get_tx_notes', {'txids': list(txids)}, _field('notes', []))

    def sign(self, data: str) -> str:
        """Sign a string with the wallet's spend key."""
        return self._invoke('sign', {'data': data}, _field('signature', ''))

    def verify(self, data: str, address: str, signature: str) -> bool:
        """Verify a signature on a string."""
        return self._invoke(
            'verify',
            {'data': data, 'address': address, 'signature': signature},
            _field('good', False),
        )

    # === Key images ===

    def export_key_images(self) -> List[SignedKeyImage]:
        """Export a signed set of key images."""
        return self._invoke(
            'export_key_images',
            decode=_records('signed_key_images', SignedKeyImage),
        )

    def import_key_images(self, signed_key_images: List[SignedKeyImage]) -> ImportKeyImagesResponse:
        """Import signed key images list and verify their spent status."""
        return self._invoke(
            'import_key_images',
            {'signed_key_images': list(signed_key_images)},
            ImportKeyImagesResponse.from_dict,
        )

    # === Address book ===

    def get_address_book(self, indexes: List[int]) -> List[AddressBookEntry]:
        """Retrieve entries from the address book."""
        return self._invoke(
            'get_address_book',
            {'entries': list(indexes)},
            _records('entries', AddressBookEntry),
        )

    def add_address_book(self, entry: AddressBookEntry) -> int:
        """
        Add an entry to the address book.

        The wallet assigns indexes, so the entry's index is sent as 0.

        Returns:
            Index of the new entry
        """
        return self._invoke(
            'add_address_book',
            replace(entry, index=0),
            _field('index', 0),
        )

    def delete_address_book(self, index: int):
        """Delete an entry from the address book."""
        return self._invoke('delete_address_book', {'index': index})

    def rescan_spent(self):
        """Rescan the blockchain for spent outputs."""
        return self._invoke('rescan_spent')

    # === Mining ===

    def start_mining(self, threads: int, background: bool, ignore_battery: bool):
        """
        Start mining in the monero daemon.

        Args:
            threads: Number of threads created for mining
            background: Allow to start the miner in smart mining mode
            ignore_battery: Ignore battery status (for smart mining only)
        """
        return self._invoke('start_mining', {
            'threads_count': threads,
            'do_background_mining': background,
            'ignore_battery': ignore_battery,
        })

    def stop_mining(self):
        """Stop mining in the monero daemon."""
        return self._invoke('stop_mining')

    # === Wallet files ===

    def get_languages(self) -> List[str]:
        """Get a list of available languages for your wallet's seed."""
        return self._invoke('get_languages', decode=_field('languages', []))

    def create_wallet(self, filename: str, password: str, language: str):
        """Create a new wallet. You need to have set the argument --wallet-dir."""
        return self._invoke('create_wallet', {
            'filename': filename,
            'password': password,
            'language': language,
        })

    def open_wallet(self, filename: str, password: str):
        """Open a wallet. You need to have set the argument --wallet-dir."""
        return self._invoke('open_wallet', {'filename': filename, 'password': password})
