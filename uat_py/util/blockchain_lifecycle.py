#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#
import logging
from contextlib import contextmanager
from typing import List

from uat_py.util.exceptions import SnapshotError, translate_errors

logger = logging.getLogger(__name__)


class BlockchainLifecycle:
    """Snapshot / revert of the whole chain state, via ganache's
    evm_snapshot and evm_revert RPCs. Snapshots nest: `revert()` always
    restores the most recent open one."""

    def __init__(self, web3):
        self.web3 = web3
        self._snapshot_ids: List[str] = []

    @property
    def depth(self) -> int:
        return len(self._snapshot_ids)

    def start(self) -> str:
        snapshot_id = self._rpc("evm_snapshot", [])
        self._snapshot_ids.append(snapshot_id)
        logger.debug("took snapshot %s (depth %s)", snapshot_id, self.depth)
        return snapshot_id

    def revert(self) -> None:
        if not self._snapshot_ids:
            raise SnapshotError("revert() without a matching start()")

        # ganache drops a snapshot once it's reverted to, so pop either way
        snapshot_id = self._snapshot_ids.pop()
        if not self._rpc("evm_revert", [snapshot_id]):
            raise SnapshotError(f"node refused to revert to snapshot {snapshot_id}")
        logger.debug("reverted to snapshot %s", snapshot_id)

    @contextmanager
    def isolated(self):
        """Run the body against a snapshot; chain state is restored on
        every exit path."""
        snapshot_id = self.start()
        try:
            yield snapshot_id
        finally:
            self.revert()

    def _rpc(self, method: str, params: list):
        with translate_errors():
            response = self.web3.provider.make_request(method, params)

        if "error" in response:
            raise SnapshotError(f"{method} failed: {response['error']}")
        return response["result"]
