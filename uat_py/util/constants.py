#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# allowances at this value are never decremented by transferFrom
UNLIMITED_ALLOWANCE_IN_BASE_UNITS = 2**256 - 1

# minted to the owner account before the token tests run
MAX_MINT_VALUE = 100000000000000000000

# explicit gas so transferFrom is mined even when it reverts
MAX_TOKEN_TRANSFERFROM_GAS = 150000

SOLC_VERSION = "0.8.12"

# dev token deployed by the test suite
DUMMY_TOKEN = "DummyTokenV2"
DUMMY_TOKEN_ARGS = ["Dummy Token V2", "DUM", 18, 0]
