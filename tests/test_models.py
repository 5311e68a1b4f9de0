"""
Tests for wallet RPC models.
"""

import dataclasses

import pytest

from walletrpc import (
    AddressBookEntry,
    Destination,
    GetTransfersResponse,
    Priority,
    TransferRequest,
    Transfer,
    URIDef,
)


class TestToDict:
    """Test request encoding."""

    def test_omit_empty(self):
        """Test optional members are dropped when unset."""
        data = TransferRequest(destinations=[Destination(amount=1, address='4a')]).to_dict()

        assert 'fee' not in data
        assert 'payment_id' not in data
        assert 'do_not_relay' not in data
        assert 'get_tx_hex' not in data
        assert data['get_tx_key'] is False

    def test_optional_members_when_set(self):
        """Test optional members are sent when set."""
        data = TransferRequest(
            payment_id='4279257e0a20608e',
            do_not_relay=True,
            get_tx_hex=True,
            priority=Priority.NORMAL,
        ).to_dict()

        assert data['payment_id'] == '4279257e0a20608e'
        assert data['do_not_relay'] is True
        assert data['get_tx_hex'] is True
        assert data['priority'] == 2
        assert type(data['priority']) is int

    def test_index_always_sent(self):
        """Test address book index is never omitted."""
        assert AddressBookEntry(address='4a').to_dict()['index'] == 0


class TestFromDict:
    """Test response decoding."""

    def test_nested(self):
        """Test nested records and lists."""
        resp = GetTransfersResponse.from_dict({
            'in': [{
                'txid': 'x',
                'destinations': [{'amount': 5, 'address': '4a'}],
            }],
        })

        assert resp.in_ == [Transfer(txid='x', destinations=[Destination(amount=5, address='4a')])]
        assert resp.out == []

    def test_unknown_members_ignored(self):
        """Test newer wallet members do not break decoding."""
        entry = AddressBookEntry.from_dict({'address': '4a', 'index': 2, 'subaddress': True})

        assert entry == AddressBookEntry(address='4a', index=2)

    def test_null_members(self):
        """Test null members keep defaults."""
        uri = URIDef.from_dict({'address': '4a', 'payment_id': None})

        assert uri.payment_id == ''


class TestImmutability:
    """Test records are frozen value objects."""

    def test_frozen(self):
        """Test fields cannot be reassigned."""
        dest = Destination(amount=1, address='4a')

        with pytest.raises(dataclasses.FrozenInstanceError):
            dest.amount = 2

    def test_equality(self):
        """Test records compare by value."""
        assert Destination(amount=1, address='4a') == Destination(amount=1, address='4a')
        assert Destination(amount=1, address='4a') != Destination(amount=2, address='4a')


class TestEnums:
    """Test enum members decode back to their enum."""

    def test_priority(self):
        """Test an int priority becomes a Priority."""
        req = TransferRequest.from_dict({'priority': 2})

        assert req.priority is Priority.NORMAL
        assert TransferRequest.from_dict(req.to_dict()) == req

    def test_unknown_priority(self):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValueError):
            TransferRequest.from_dict({'priority': 9})


class TestMalformed:
    """Test wrong JSON shapes are rejected."""

    def test_not_an_object(self):
        """Test a record from a non-object."""
        with pytest.raises(TypeError):
            Destination.from_dict('junk')

    def test_list_member_not_a_list(self):
        """Test a list member holding a string."""
        with pytest.raises(TypeError):
            GetTransfersResponse.from_dict({'out': 'junk'})
