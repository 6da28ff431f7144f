#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
import pytest

from uat_py.util.blockchain_lifecycle import BlockchainLifecycle
from uat_py.util.networkutil import DEV_CHAINID, chain_id_to_web3
from uat_py.util.testutil import get_account0, get_all_accounts
from uat_py.util.token_wrapper import TokenWrapper


@pytest.fixture(scope="module")
def w3():
    web3 = chain_id_to_web3(DEV_CHAINID)
    account = get_account0()
    web3.eth.default_account = account.address
    return web3


@pytest.fixture(scope="module")
def all_accounts():
    accounts = get_all_accounts()
    assert len(accounts) >= 2, "need at least two TEST_PRIVATE_KEY<i> accounts"
    return accounts


@pytest.fixture(scope="module")
def owner(all_accounts):
    return all_accounts[0]


@pytest.fixture(scope="module")
def spender(all_accounts):
    return all_accounts[1]


@pytest.fixture(scope="module")
def lifecycle(w3):
    return BlockchainLifecycle(w3)


@pytest.fixture(scope="module")
def token_wrapper(w3, all_accounts):
    return TokenWrapper(w3, all_accounts)
