#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#

"""All contracts inherit from `ContractBase` class."""
import logging
from typing import Optional

from enforce_typing import enforce_types
from eth_account.signers.local import LocalAccount
from web3.main import Web3  # pylint: disable=no-name-in-module

from uat_py.util.contract_utils import deploy_contract, load_contract
from uat_py.util.exceptions import TransactionReverted, translate_errors

logger = logging.getLogger(__name__)

READ_ONLY = ["view", "pure"]


def _split_args(args, kwargs):
    """Returns (positional args with wallets replaced by addresses, tx_dict)."""
    args2 = list(args)
    tx_dict = None

    # retrieve tx dict from either args or kwargs
    if args and isinstance(args[-1], dict):
        tx_dict = args[-1] if args[-1].get("from") else None
        args2 = list(args[:-1])

    if "tx_dict" in kwargs:
        tx_dict = kwargs["tx_dict"] if kwargs["tx_dict"].get("from") else None
        del kwargs["tx_dict"]

    # use addresses instead of wallets when doing the call
    args2 = [arg.address if hasattr(arg, "address") else arg for arg in args2]
    return args2, tx_dict


def function_wrapper(contract, web3, contract_functions, func_name):
    # direct function calls
    if hasattr(contract, func_name):
        return getattr(contract, func_name)

    def call(*args, **kwargs):
        """Simulate the function with eth_call and return its result.
        Nothing is committed; a failing precondition raises ContractRevert."""
        args2, tx_dict = _split_args(args, kwargs)
        call_dict = {}
        if tx_dict:
            sender = tx_dict["from"]
            call_dict["from"] = getattr(sender, "address", sender)

        func = getattr(contract_functions, func_name)
        with translate_errors():
            return func(*args2, **kwargs).call(call_dict)

    # contract functions
    def wrap(*args, **kwargs):
        args2, tx_dict = _split_args(args, kwargs)

        func = getattr(contract_functions, func_name)
        result = func(*args2, **kwargs)
        read_only = result.abi["stateMutability"] in READ_ONLY

        # view/pure functions don't need "from" key in tx_dict
        if not tx_dict and not read_only:
            raise ValueError(f"{func_name} needs tx_dict with 'from' key.")

        # if it's a view/pure function, just call it
        if read_only:
            with translate_errors():
                return result.call()

        # if it's a transaction, build and send it
        wallet = tx_dict["from"]
        tx_dict2 = tx_dict.copy()
        tx_dict2["from"] = wallet.address

        with translate_errors():
            tx_dict2["nonce"] = web3.eth.get_transaction_count(wallet.address)
            tx = result.build_transaction(tx_dict2)

            # sign with wallet private key and send transaction
            signed_tx = web3.eth.account.sign_transaction(tx, wallet.key)
            tx_hash = web3.eth.send_raw_transaction(signed_tx.rawTransaction)
            receipt = web3.eth.wait_for_transaction_receipt(tx_hash)

        logger.debug(
            "%s from %s: tx %s status %s",
            func_name,
            wallet.address,
            receipt.transactionHash.hex(),
            receipt.status,
        )
        if receipt.status == 0:
            raise TransactionReverted(receipt)

        return receipt

    wrap.call = call
    wrap.__name__ = func_name
    return wrap


class ContractBase:
    """Base class for all contract objects."""

    @enforce_types
    def __init__(
        self,
        web3: Web3,
        path: str,
        address: Optional[str] = None,
        constructor_args: Optional[list] = None,
        deployer: Optional[LocalAccount] = None,
    ) -> None:
        """Deploys `path` if `constructor_args` is given, otherwise loads
        the deployed contract at `address`."""
        if constructor_args is not None:
            if deployer is None:
                raise ValueError("Deploying needs a deployer account.")
            self.contract = deploy_contract(web3, path, constructor_args, deployer)
        elif address is not None:
            self.contract = load_contract(web3, path, address)
        else:
            raise ValueError("Need either address or constructor_args.")
        assert not address or (self.contract.address.lower() == address.lower())

        self.path = path
        transferable = [
            x for x in dir(self.contract.functions) if not x.startswith("_")
        ]

        # transfer contract functions to ContractBase object
        for function in transferable:
            setattr(
                self,
                function,
                function_wrapper(
                    self.contract,
                    web3,
                    self.contract.functions,
                    function,
                ),
            )

    def __repr__(self) -> str:
        return f"<{self.path} at {self.contract.address}>"
