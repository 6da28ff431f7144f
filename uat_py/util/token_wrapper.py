#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#

"""Address-oriented ERC20 client.

Every method takes plain addresses: the token's, and the accounts'. Accounts
that have to sign (owner for `approve`, sender for `transfer`, caller for
`transferFrom`) must be among the wallets the wrapper was built with.
"""
import logging
from typing import Dict, Optional

from enforce_typing import enforce_types
from web3.main import Web3

from uat_py.util import constants
from uat_py.util.base18 import str_with_wei
from uat_py.util.contract_base import ContractBase

logger = logging.getLogger(__name__)


class TokenWrapper:
    UNLIMITED_ALLOWANCE_IN_BASE_UNITS = constants.UNLIMITED_ALLOWANCE_IN_BASE_UNITS

    @enforce_types
    def __init__(self, web3: Web3, wallets: list, abi_path: str = constants.DUMMY_TOKEN):
        self.web3 = web3
        self.abi_path = abi_path
        self._wallets = {w.address.lower(): w for w in wallets}
        self._tokens: Dict[str, ContractBase] = {}

    @enforce_types
    def get_balance(self, token_address: str, owner_address: str) -> int:
        return self._token(token_address).balanceOf(owner_address)

    @enforce_types
    def get_allowance(
        self, token_address: str, owner_address: str, spender_address: str
    ) -> int:
        return self._token(token_address).allowance(owner_address, spender_address)

    @enforce_types
    def get_total_supply(self, token_address: str) -> int:
        return self._token(token_address).totalSupply()

    @enforce_types
    def set_allowance(
        self,
        token_address: str,
        owner_address: str,
        spender_address: str,
        amount: int,
        tx_opts: Optional[dict] = None,
    ):
        """Let `spender_address` move up to `amount` of the owner's tokens."""
        logger.info(
            "approve %s for %s on %s",
            spender_address,
            str_with_wei(amount),
            token_address,
        )
        return self._token(token_address).approve(
            spender_address, amount, self._tx_dict(owner_address, tx_opts)
        )

    @enforce_types
    def set_unlimited_allowance(
        self,
        token_address: str,
        owner_address: str,
        spender_address: str,
        tx_opts: Optional[dict] = None,
    ):
        return self.set_allowance(
            token_address,
            owner_address,
            spender_address,
            self.UNLIMITED_ALLOWANCE_IN_BASE_UNITS,
            tx_opts,
        )

    @enforce_types
    def transfer(
        self,
        token_address: str,
        from_address: str,
        to_address: str,
        amount: int,
        tx_opts: Optional[dict] = None,
    ):
        logger.info(
            "transfer %s from %s to %s", str_with_wei(amount), from_address, to_address
        )
        return self._token(token_address).transfer(
            to_address, amount, self._tx_dict(from_address, tx_opts)
        )

    @enforce_types
    def transfer_from(
        self,
        token_address: str,
        sender_address: str,
        from_address: str,
        to_address: str,
        amount: int,
        tx_opts: Optional[dict] = None,
    ):
        """`sender_address` moves `amount` from `from_address` to `to_address`,
        spending its allowance."""
        logger.info(
            "transferFrom %s from %s to %s by %s",
            str_with_wei(amount),
            from_address,
            to_address,
            sender_address,
        )
        return self._token(token_address).transferFrom(
            from_address, to_address, amount, self._tx_dict(sender_address, tx_opts)
        )

    def _token(self, token_address: str) -> ContractBase:
        key = token_address.lower()
        if key not in self._tokens:
            self._tokens[key] = ContractBase(
                self.web3, self.abi_path, address=token_address
            )
        return self._tokens[key]

    def _tx_dict(self, address: str, tx_opts: Optional[dict]) -> dict:
        wallet = self._wallets.get(address.lower())
        if wallet is None:
            raise KeyError(f"No wallet for {address}; cannot sign.")

        tx_dict = dict(tx_opts or {})
        tx_dict["from"] = wallet
        return tx_dict
