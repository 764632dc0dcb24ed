"""
Contract fingerprint utility.

Python's built-in ``hash`` of a contract is consistent with equality but
salted per process. Deduplication caches that outlive a process need a
stable digest instead; this module derives one from the canonical
serialized form of a contract.
"""

import hashlib
import json
from typing import Any


class ContractHasher:
    """
    Normalizes contracts into canonical JSON for stable hashing.
    """

    @staticmethod
    def normalize(contract: Any) -> str:
        """
        Canonical JSON form of a contract.

        Mapping keys are sorted (key order never affects equality); header
        and sequence order is kept (it does).

        Args:
            contract: Contract (anything exposing ``to_dict()``)

        Returns:
            Compact, key-sorted JSON string
        """
        return json.dumps(contract.to_dict(), sort_keys=True, separators=(",", ":"), default=str)

    @staticmethod
    def calculate_fingerprint(contract: Any) -> str:
        """Calculate SHA-256 hex digest of the normalized contract."""
        normalized = ContractHasher.normalize(contract)
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


def fingerprint(contract: Any) -> str:
    """Stable, process-independent digest of a contract."""
    return ContractHasher.calculate_fingerprint(contract)
