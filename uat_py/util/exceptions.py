#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
# adapted from https://github.com/raiden-network/raiden/blob/e43ebbb8c09407d9793e50b1005bfdb67c267b4a/raiden/exceptions.py
from contextlib import contextmanager
from typing import Optional

import requests
from web3.exceptions import ContractLogicError, TimeExhausted


class UatError(Exception):
    """Base exception, used to catch all uat related exceptions."""


# Exceptions raised by the chain rejecting a call


class ContractRevert(UatError):
    """Raised if a contract refused the state transition because one of its
    preconditions failed, e.g. insufficient balance or allowance.
    """

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(f"execution reverted: {reason}" if reason else "revert")


class TransactionReverted(ContractRevert):
    """Raised if a transaction was mined but its receipt has status 0."""

    def __init__(self, receipt, reason: Optional[str] = None):
        self.receipt = receipt
        self.reason = reason
        message = f"tx {_tx_hash(receipt)} has status 0"
        UatError.__init__(self, f"{message}: {reason}" if reason else message)


# Exceptions raised because the call could not be made at all


class ChainUnavailableError(UatError):
    """Raised if the RPC endpoint could not be reached or timed out.
    Not a ContractRevert subclass.
    """


class SnapshotError(UatError):
    """Raised if the node rejects evm_snapshot / evm_revert."""


def is_revert_message(message) -> bool:
    return "revert" in str(message).lower()


def revert_reason(message) -> Optional[str]:
    """Pull the reason string out of a node's revert message, if any."""
    message = str(message)
    for prefix in ("execution reverted: ", "VM Exception while processing transaction: revert "):
        if prefix in message:
            return message.split(prefix, 1)[1].strip() or None
    return None


@contextmanager
def translate_errors():
    """Classify failures from web3 / the provider into UatError subclasses.

    Anything not recognised propagates unchanged.
    """
    try:
        yield
    except ContractLogicError as e:
        raise ContractRevert(revert_reason(_message(e))) from e
    except ValueError as e:
        # raw JSON-RPC errors, e.g. from eth_sendRawTransaction
        payload = e.args[0] if e.args else None
        if isinstance(payload, dict) and is_revert_message(payload.get("message")):
            raise ContractRevert(revert_reason(payload["message"])) from e
        raise
    except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
        raise ChainUnavailableError(str(e)) from e
    except TimeExhausted as e:
        raise ChainUnavailableError(str(e)) from e
    except ConnectionError as e:
        raise ChainUnavailableError(str(e)) from e


def _message(e: Exception) -> str:
    if getattr(e, "message", None):
        return str(e.message)
    return str(e.args[0]) if e.args else ""


def _tx_hash(receipt) -> str:
    tx_hash = receipt["transactionHash"]
    return tx_hash.hex() if hasattr(tx_hash, "hex") else str(tx_hash)
