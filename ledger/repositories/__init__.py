"""Read-only data access for the loaded claims."""

from ledger.repositories.claim_store import ClaimStore

__all__ = ["ClaimStore"]
