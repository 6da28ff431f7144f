#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
import requests
from enforce_typing import enforce_types

from uat_py.util.blockchain_lifecycle import BlockchainLifecycle
from uat_py.util.exceptions import ChainUnavailableError, SnapshotError


class FakeNode:
    """Answers evm_snapshot / evm_revert like ganache does."""

    def __init__(self):
        self.next_id = 1
        self.open = []
        self.calls = []

    def make_request(self, method, params):
        self.calls.append((method, params))
        if method == "evm_snapshot":
            snapshot_id = hex(self.next_id)
            self.next_id += 1
            self.open.append(snapshot_id)
            return {"jsonrpc": "2.0", "id": 0, "result": snapshot_id}
        if method == "evm_revert":
            if params[0] not in self.open:
                return {"jsonrpc": "2.0", "id": 0, "result": False}
            self.open = self.open[: self.open.index(params[0])]
            return {"jsonrpc": "2.0", "id": 0, "result": True}
        return {"jsonrpc": "2.0", "id": 0, "error": {"message": "unknown method"}}


@pytest.fixture
def node():
    return FakeNode()


@pytest.fixture
def lifecycle(node):
    return BlockchainLifecycle(SimpleNamespace(provider=node))


@enforce_types
def test_start_revert(lifecycle, node):
    snapshot_id = lifecycle.start()
    assert snapshot_id == "0x1"
    assert lifecycle.depth == 1

    lifecycle.revert()
    assert lifecycle.depth == 0
    assert node.calls == [("evm_snapshot", []), ("evm_revert", ["0x1"])]


@enforce_types
def test_nested_reverts_most_recent_first(lifecycle, node):
    lifecycle.start()
    lifecycle.start()
    lifecycle.revert()
    lifecycle.revert()
    assert node.calls[-2:] == [("evm_revert", ["0x2"]), ("evm_revert", ["0x1"])]


@enforce_types
def test_isolated_reverts_on_success(lifecycle, node):
    with lifecycle.isolated() as snapshot_id:
        assert snapshot_id == "0x1"
        assert lifecycle.depth == 1
    assert lifecycle.depth == 0
    assert node.calls[-1] == ("evm_revert", ["0x1"])


@enforce_types
def test_isolated_reverts_on_failure(lifecycle, node):
    with pytest.raises(AssertionError):
        with lifecycle.isolated():
            assert False, "case failed"
    assert lifecycle.depth == 0
    assert node.calls[-1] == ("evm_revert", ["0x1"])


@enforce_types
def test_revert_without_start(lifecycle):
    with pytest.raises(SnapshotError, match="without a matching start"):
        lifecycle.revert()


@enforce_types
def test_node_refuses_revert(lifecycle, node):
    lifecycle.start()
    node.open = []
    with pytest.raises(SnapshotError, match="refused"):
        lifecycle.revert()
    assert lifecycle.depth == 0


@enforce_types
def test_rpc_error():
    provider = Mock()
    provider.make_request.return_value = {"error": {"message": "method not found"}}
    lifecycle = BlockchainLifecycle(SimpleNamespace(provider=provider))
    with pytest.raises(SnapshotError, match="evm_snapshot failed"):
        lifecycle.start()
    assert lifecycle.depth == 0


@enforce_types
def test_node_down():
    provider = Mock()
    provider.make_request.side_effect = requests.exceptions.ConnectionError("refused")
    lifecycle = BlockchainLifecycle(SimpleNamespace(provider=provider))
    with pytest.raises(ChainUnavailableError):
        lifecycle.start()
