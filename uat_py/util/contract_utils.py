#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import solcx
from enforce_typing import enforce_types
from eth_account.signers.local import LocalAccount
from solcx import compile_source
from solcx.exceptions import SolcNotInstalled
from web3.contract import Contract
from web3.main import Web3

from uat_py.util.constants import SOLC_VERSION
from uat_py.util.exceptions import TransactionReverted, translate_errors

logger = logging.getLogger(__name__)

_DEFAULT_CONTRACTS_DIR = Path(__file__).resolve().parents[2] / "contracts"


@enforce_types
def get_contracts_dir() -> Path:
    return Path(os.getenv("CONTRACTS_DIR", str(_DEFAULT_CONTRACTS_DIR))).expanduser()


@enforce_types
def get_contract_source(path: str) -> str:
    """Returns the Solidity source for a contract name."""
    source_path = (get_contracts_dir() / f"{path}.sol").resolve()

    if not source_path.exists():
        raise TypeError(f"Contract source {source_path} does not exist.")

    with open(source_path) as f:
        return f.read()


@lru_cache(maxsize=None)
def get_contract_definition(path: str) -> Dict[str, Any]:
    """Compiles contracts/<path>.sol and returns abi & bytecode of the
    contract named like the file."""
    contract_source = get_contract_source(path)
    contract_base_name = path if "/" not in path else path.split("/")[-1]
    _use_solc()

    compiled_sol = compile_source(contract_source, output_values=["abi", "bin"])

    # the compiler also returns every base contract in the same file
    for contract_id, contract_interface in compiled_sol.items():
        if contract_id.split(":")[-1].lower() == contract_base_name.lower():
            return {
                "abi": contract_interface["abi"],
                "bytecode": contract_interface["bin"],
            }

    raise TypeError(f"No contract {contract_base_name} in {path}.sol")


@enforce_types
def load_contract(web3: Web3, path: str, address: str) -> Contract:
    """Loads a contract using its name and address."""
    contract_definition = get_contract_definition(path)
    return web3.eth.contract(
        address=web3.to_checksum_address(address),
        abi=contract_definition["abi"],
        bytecode=contract_definition["bytecode"],
    )


@enforce_types
def deploy_contract(
    web3: Web3, path: str, constructor_args: list, deployer: LocalAccount
) -> Contract:
    """Deploys contracts/<path>.sol, signed by `deployer`."""
    contract_definition = get_contract_definition(path)
    abi = contract_definition["abi"]

    contract = web3.eth.contract(abi=abi, bytecode=contract_definition["bytecode"])

    with translate_errors():
        tx = contract.constructor(*constructor_args).build_transaction(
            {
                "from": deployer.address,
                "nonce": web3.eth.get_transaction_count(deployer.address),
            }
        )
        signed_tx = web3.eth.account.sign_transaction(tx, deployer.key)
        tx_hash = web3.eth.send_raw_transaction(signed_tx.rawTransaction)
        tx_receipt = web3.eth.wait_for_transaction_receipt(tx_hash)

    if tx_receipt.status == 0:
        raise TransactionReverted(tx_receipt)

    logger.info("deployed %s at %s", path, tx_receipt.contractAddress)
    return web3.eth.contract(address=tx_receipt.contractAddress, abi=abi)


def _use_solc():
    try:
        solcx.set_solc_version(SOLC_VERSION)
    except SolcNotInstalled:
        logger.info("installing solc %s", SOLC_VERSION)
        solcx.install_solc(version=SOLC_VERSION)
        solcx.set_solc_version(SOLC_VERSION)
