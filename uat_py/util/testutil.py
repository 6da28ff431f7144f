#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
import logging
import os
from typing import List

from enforce_typing import enforce_types
from eth_account import Account
from web3.main import Web3

from uat_py.util import constants
from uat_py.util.base18 import str_with_wei
from uat_py.util.contract_base import ContractBase

logger = logging.getLogger(__name__)

MAX_TEST_ACCOUNTS = 9


def get_account0():
    return _account(0)


def get_all_accounts():
    """Dev accounts in index order, as many as TEST_PRIVATE_KEY<i> are set."""
    accounts = []
    for index in range(MAX_TEST_ACCOUNTS):
        if not os.getenv(f"TEST_PRIVATE_KEY{index}"):
            break
        accounts.append(_account(index))
    return accounts


def get_available_addresses() -> List[str]:
    return [account.address for account in get_all_accounts()]


@enforce_types
def deploy_dummy_token(web3: Web3, owner, mint_amount: int = 0) -> ContractBase:
    """Deploy a fresh DummyTokenV2 from `owner` and mint `mint_amount` to it."""
    token = ContractBase(
        web3,
        constants.DUMMY_TOKEN,
        constructor_args=constants.DUMMY_TOKEN_ARGS,
        deployer=owner,
    )
    if mint_amount:
        token.mint(mint_amount, {"from": owner})
        logger.info("minted %s to %s", str_with_wei(mint_amount), owner.address)
    return token


# pylint: disable=no-value-for-parameter
def _account(index: int):
    private_key = os.getenv(f"TEST_PRIVATE_KEY{index}")
    if not private_key:
        raise ValueError(f"Need to set TEST_PRIVATE_KEY{index} env variable.")
    return Account.from_key(private_key=private_key)
