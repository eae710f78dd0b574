"""Shared fixtures for waves trade tests."""

import json
from unittest.mock import Mock

import pytest
import requests

from waves_trade.models import (
    PrivateKeyAccount,
    Transaction,
    TransactionBuilder,
    TransactionType,
)
from waves_trade.services.node_client import NodeClient

NODE_URL = "http://node.test:6869"
FROZEN_TIME = 1_500_000_000_000


def make_response(status_code=200, body=None, raw=None):
    """建立 requests.Response 測試物件"""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    content = raw if raw is not None else json.dumps(body)
    response._content = content.encode("utf-8")
    return response


class FakeAccount(PrivateKeyAccount):
    def __init__(self, public_key=bytes(range(32)), address="3NBVqYXrapgJP9atQccdBPAgJPwHDKkh6A8"):
        self._public_key = public_key
        self._address = address

    @property
    def public_key(self):
        return self._public_key

    @property
    def address(self):
        return self._address


class FakeBuilder(TransactionBuilder):
    """記錄呼叫參數的假交易建構器"""

    def __init__(self):
        self.signed = []
        self.calls = []

    def sign(self, account, data):
        self.signed.append(data)
        return "fakeSignature"

    def _tx(self, name, tx_type, /, asset_pair=None, **data):
        self.calls.append((name, data))
        return Transaction(tx_type, {"type": name, **data}, asset_pair=asset_pair)

    def make_transfer_tx(self, account, to_address, amount, asset_id, fee, fee_asset_id, message):
        return self._tx(
            "transfer",
            TransactionType.TRANSFER,
            recipient=to_address,
            amount=amount,
            assetId=asset_id,
            fee=fee,
            feeAssetId=fee_asset_id,
            attachment=message,
        )

    def make_lease_tx(self, account, to_address, amount, fee):
        return self._tx("lease", TransactionType.LEASE, recipient=to_address, amount=amount, fee=fee)

    def make_lease_cancel_tx(self, account, tx_id, fee):
        return self._tx("lease_cancel", TransactionType.LEASE_CANCEL, txId=tx_id, fee=fee)

    def make_issue_tx(self, account, name, description, quantity, decimals, reissuable, fee):
        return self._tx(
            "issue",
            TransactionType.ISSUE,
            name=name,
            description=description,
            quantity=quantity,
            decimals=decimals,
            reissuable=reissuable,
            fee=fee,
        )

    def make_reissue_tx(self, account, asset_id, quantity, reissuable, fee):
        return self._tx(
            "reissue",
            TransactionType.REISSUE,
            assetId=asset_id,
            quantity=quantity,
            reissuable=reissuable,
            fee=fee,
        )

    def make_burn_tx(self, account, asset_id, amount, fee):
        return self._tx("burn", TransactionType.BURN, assetId=asset_id, amount=amount, fee=fee)

    def make_alias_tx(self, account, alias, scheme, fee):
        return self._tx("alias", TransactionType.ALIAS, alias=alias, scheme=scheme, fee=fee)

    def make_order_tx(self, account, matcher_key, order_type, asset_pair, price, amount, expiration, matcher_fee):
        return self._tx(
            "order",
            TransactionType.ORDER,
            matcherPublicKey=matcher_key,
            orderType=order_type.value,
            assetPair=asset_pair.to_dict(),
            price=price,
            amount=amount,
            expiration=expiration,
            matcherFee=matcher_fee,
        )

    def make_order_cancel_tx(self, account, asset_pair, order_id):
        return self._tx(
            "order_cancel",
            TransactionType.ORDER_CANCEL,
            asset_pair=asset_pair,
            orderId=order_id,
        )


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def builder():
    return FakeBuilder()


@pytest.fixture
def node(session, builder):
    return NodeClient(NODE_URL, builder=builder, session=session, clock=lambda: FROZEN_TIME)
