"""Immutable, ordered claim store loaded once from the manifest."""

from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple

from ledger.errors import ClaimStoreError
from ledger.schemas.claim import Claim, Manifest


class ClaimStore:
    """Ordered claims keyed by id.

    The sequence is frozen at construction; views filter and sort copies.
    """

    def __init__(self, claims: Iterable[Claim]):
        self._claims: Tuple[Claim, ...] = tuple(claims)
        by_id = {}
        for claim in self._claims:
            if claim.id in by_id:
                raise ClaimStoreError(f"Duplicate claim id: {claim.id}")
            by_id[claim.id] = claim
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_manifest(cls, manifest: Manifest) -> "ClaimStore":
        return cls(manifest.claims)

    # ── reads ────────────────────────────────────────────────────────

    @property
    def claims(self) -> Tuple[Claim, ...]:
        return self._claims

    def get(self, claim_id: str) -> Optional[Claim]:
        return self._by_id.get(claim_id)

    def qualifying(self, threshold: float) -> List[Claim]:
        """Claims at or above ``threshold``, highest confidence first."""
        return sorted(
            (c for c in self._claims if c.qualifies(threshold)),
            key=lambda c: c.confidence,
            reverse=True,
        )

    def count_qualifying(self, threshold: float) -> int:
        return sum(1 for c in self._claims if c.qualifies(threshold))

    def __len__(self) -> int:
        return len(self._claims)

    def __iter__(self) -> Iterator[Claim]:
        return iter(self._claims)

    def __getitem__(self, index: int) -> Claim:
        return self._claims[index]
