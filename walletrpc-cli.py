#!/usr/bin/env python3
"""
Monero Wallet RPC CLI
Talk to a running monero-wallet-rpc.

Usage:
    walletrpc-cli balance                          Show wallet balance
    walletrpc-cli address                          Show wallet address
    walletrpc-cli height                           Show wallet height
    walletrpc-cli transfer <address> <amount>      Send XMR
    walletrpc-cli sweep-dust                       Sweep dust outputs
    walletrpc-cli store                            Save the wallet
    walletrpc-cli query-key <type>                 Show mnemonic, view_key or spend_key
    walletrpc-cli integrated-address               Make an integrated address
    walletrpc-cli split-address <address>          Split an integrated address
    walletrpc-cli payment-id [--long]              Generate a payment id
    walletrpc-cli sign <data>                      Sign data
    walletrpc-cli verify <data> <addr> <sig>       Verify a signature
    walletrpc-cli address-book list|add|delete     Manage the address book
    walletrpc-cli languages                        List seed languages
"""

import sys
import os
import argparse
import logging
from dataclasses import replace

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from walletrpc import (
    AddressBookEntry,
    Config,
    Destination,
    Priority,
    QueryKeyType,
    TransferRequest,
    TransportError,
    WalletClient,
    WalletError,
    decimal_to_xmr,
    new_payment_id64,
    new_payment_id256,
    xmr_to_decimal,
)
from walletrpc import config

logger = logging.getLogger('walletrpc-cli')


def make_client(args) -> WalletClient:
    """Build a client from --config, overridden by --address."""
    cfg = Config.from_file(args.config)
    if args.address:
        cfg = replace(cfg, address=args.address)
    logger.debug(f"Wallet RPC endpoint: {cfg.address}")
    return WalletClient(cfg)


def cmd_balance(args):
    """Show wallet balance."""
    balance, unlocked = make_client(args).get_balance()

    print("\n💰 Wallet Balance")
    print("═" * 50)
    print(f"  Balance:  {xmr_to_decimal(balance)} {config.COIN_TICKER}")
    print(f"  Unlocked: {xmr_to_decimal(unlocked)} {config.COIN_TICKER}")
    print()


def cmd_address(args):
    """Show wallet address."""
    print(make_client(args).get_address())


def cmd_height(args):
    """Show wallet height."""
    print(make_client(args).get_height())


def cmd_transfer(args):
    """Send XMR to an address."""
    try:
        amount = decimal_to_xmr(args.amount)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    req = TransferRequest(
        destinations=[Destination(amount=amount, address=args.to)],
        mixin=args.mixin,
        priority=Priority(args.priority),
        payment_id=args.payment_id or '',
        get_tx_key=True,
    )

    print(f"\n📤 Sending {xmr_to_decimal(amount)} {config.COIN_TICKER} to {args.to[:20]}...")
    resp = make_client(args).transfer(req)

    print(f"✓ Transaction sent")
    print(f"  TX hash: {resp.tx_hash}")
    print(f"  TX key:  {resp.tx_key}")
    print(f"  Fee:     {xmr_to_decimal(resp.fee)} {config.COIN_TICKER}")


def cmd_sweep_dust(args):
    """Sweep dust outputs back into the wallet."""
    tx_hashes = make_client(args).sweep_dust()
    if not tx_hashes:
        print("No dust to sweep")
        return
    for tx_hash in tx_hashes:
        print(f"✓ {tx_hash}")


def cmd_store(args):
    """Save the wallet file."""
    make_client(args).store()
    print("✓ Wallet stored")


def cmd_query_key(args):
    """Show a wallet key."""
    print(make_client(args).query_key(QueryKeyType(args.key_type)))


def cmd_integrated_address(args):
    """Make an integrated address."""
    print(make_client(args).make_integrated_address(args.payment_id or ''))


def cmd_split_address(args):
    """Split an integrated address."""
    payment_id, address = make_client(args).split_integrated_address(args.integrated_address)
    print(f"  Address:    {address}")
    print(f"  Payment ID: {payment_id}")


def cmd_payment_id(args):
    """Generate a random payment id (no wallet needed)."""
    print(new_payment_id256() if args.long else new_payment_id64())


def cmd_sign(args):
    """Sign data with the wallet's spend key."""
    print(make_client(args).sign(args.data))


def cmd_verify(args):
    """Verify a signature."""
    if make_client(args).verify(args.data, args.signer, args.signature):
        print("✓ Signature is valid")
    else:
        print("✗ Signature is NOT valid")
        sys.exit(1)


def cmd_address_book(args):
    """Manage the address book."""
    client = make_client(args)

    if args.action == 'list':
        entries = client.get_address_book(args.indexes)
        if not entries:
            print("Address book is empty")
            return
        print("\n📒 Address Book")
        print("═" * 50)
        for entry in entries:
            print(f"  [{entry.index}] {entry.address}  {entry.description}")
        print()
    elif args.action == 'add':
        index = client.add_address_book(AddressBookEntry(
            address=args.entry_address,
            payment_id=args.payment_id or '',
            description=args.description or '',
        ))
        print(f"✓ Added entry {index}")
    elif args.action == 'delete':
        client.delete_address_book(args.index)
        print(f"✓ Deleted entry {args.index}")


def cmd_languages(args):
    """List languages available for seeds."""
    for language in make_client(args).get_languages():
        print(f"  • {language}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Monero Wallet RPC CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--address', help=f'Wallet RPC endpoint (default: {config.DEFAULT_ADDRESS})')
    parser.add_argument('--config', help='Config file (default: ~/.walletrpc/walletrpc.conf)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser('balance', help='Show wallet balance')
    subparsers.add_parser('address', help='Show wallet address')
    subparsers.add_parser('height', help='Show wallet height')

    # transfer
    transfer = subparsers.add_parser('transfer', help='Send XMR')
    transfer.add_argument('to', help='Destination address')
    transfer.add_argument('amount', help='Amount in XMR, e.g. 0.5')
    transfer.add_argument('--priority', type=int, default=int(Priority.DEFAULT),
                          choices=[int(p) for p in Priority])
    transfer.add_argument('--mixin', type=int, default=10)
    transfer.add_argument('--payment-id')

    subparsers.add_parser('sweep-dust', help='Sweep dust outputs')
    subparsers.add_parser('store', help='Save the wallet')

    query_key = subparsers.add_parser('query-key', help='Show a wallet key')
    query_key.add_argument('key_type', choices=[k.value for k in QueryKeyType])

    integrated = subparsers.add_parser('integrated-address', help='Make an integrated address')
    integrated.add_argument('--payment-id')

    split = subparsers.add_parser('split-address', help='Split an integrated address')
    split.add_argument('integrated_address')

    payment_id = subparsers.add_parser('payment-id', help='Generate a payment id')
    payment_id.add_argument('--long', action='store_true', help='256 bit id instead of 64 bit')

    sign = subparsers.add_parser('sign', help='Sign data')
    sign.add_argument('data')

    verify = subparsers.add_parser('verify', help='Verify a signature')
    verify.add_argument('data')
    verify.add_argument('signer', help='Address that signed')
    verify.add_argument('signature')

    # address-book
    book = subparsers.add_parser('address-book', help='Manage the address book')
    book_actions = book.add_subparsers(dest='action')
    book_list = book_actions.add_parser('list', help='List entries')
    book_list.add_argument('indexes', nargs='*', type=int)
    book_add = book_actions.add_parser('add', help='Add an entry')
    book_add.add_argument('entry_address')
    book_add.add_argument('--payment-id')
    book_add.add_argument('--description')
    book_delete = book_actions.add_parser('delete', help='Delete an entry')
    book_delete.add_argument('index', type=int)

    subparsers.add_parser('languages', help='List seed languages')

    return parser


COMMANDS = {
    'balance': cmd_balance,
    'address': cmd_address,
    'height': cmd_height,
    'transfer': cmd_transfer,
    'sweep-dust': cmd_sweep_dust,
    'store': cmd_store,
    'query-key': cmd_query_key,
    'integrated-address': cmd_integrated_address,
    'split-address': cmd_split_address,
    'payment-id': cmd_payment_id,
    'sign': cmd_sign,
    'verify': cmd_verify,
    'address-book': cmd_address_book,
    'languages': cmd_languages,
}


def main():
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    handler = COMMANDS.get(args.command)
    if handler is None or (args.command == 'address-book' and not args.action):
        parser.print_help()
        return

    try:
        handler(args)
    except WalletError as e:
        print(f"❌ [{e.code}] {e.message}")
        sys.exit(1)
    except TransportError as e:
        if e.status_code is not None:
            print(f"❌ Wallet RPC answered HTTP {e.status_code}: {e}")
        else:
            print(f"❌ {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
