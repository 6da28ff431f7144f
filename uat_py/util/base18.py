#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
from decimal import Decimal

from enforce_typing import enforce_types

from uat_py.util.constants import UNLIMITED_ALLOWANCE_IN_BASE_UNITS

BASE18 = 10**18


@enforce_types
def from_wei(amt_base: int) -> float:
    return float(Decimal(amt_base) / BASE18)


@enforce_types
def to_wei(amt_eth) -> int:
    """Convert a token amount to base units. Goes through Decimal so
    amounts above 2**53 base units stay exact."""
    return int(Decimal(str(amt_eth)) * BASE18)


@enforce_types
def str_with_wei(amt_wei: int) -> str:
    if amt_wei == UNLIMITED_ALLOWANCE_IN_BASE_UNITS:
        return f"unlimited ({amt_wei} wei)"
    return f"{from_wei(amt_wei)} ({amt_wei} wei)"
