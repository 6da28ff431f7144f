#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
from enforce_typing import enforce_types
from web3.main import Web3

from uat_py.util.web3 import get_rpc_url, get_web3

# Development chainid is the one barge's ganache runs with; ganache's own
# default is kept for a bare `ganache --wallet.deterministic`
_RAW_CHAIN_DATA = [
    (8996, "development"),
    (1337, "ganache"),
]

# chainids and names must be unique
__chainids_list = [x[0] for x in _RAW_CHAIN_DATA]
assert len(__chainids_list) == len(set(__chainids_list)), "need unique chainids"

__names_list = [x[1] for x in _RAW_CHAIN_DATA]
assert len(__names_list) == len(set(__names_list)), "need unique names"

_CHAINID_TO_NETWORK = {x[0]: x[1] for x in _RAW_CHAIN_DATA}
_NETWORK_TO_CHAINID = {
    network: chainID for chainID, network in _CHAINID_TO_NETWORK.items()
}

DEV_CHAINID = _NETWORK_TO_CHAINID["development"]


@enforce_types
def chain_id_to_network(chainID: int) -> str:
    """Returns the network name for a given chainID"""
    return _CHAINID_TO_NETWORK[chainID]


@enforce_types
def network_to_chain_id(network: str) -> int:
    """Returns the chainID for a given network name"""
    return _NETWORK_TO_CHAINID[network]


@enforce_types
def chain_id_to_web3(chainID: int) -> Web3:
    """Returns the web3 instance for a given chainID"""
    network_name = chain_id_to_network(chainID)
    return get_web3(get_rpc_url(network_name))
