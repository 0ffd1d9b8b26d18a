"""Domain exceptions.

Only manifest loading is allowed to fail the page; everything else is
either a contract violation (raised loudly) or a no-op.
"""


class LedgerError(Exception):
    """Base class for all navigator errors."""


class ManifestLoadError(LedgerError):
    """The claim manifest could not be fetched, parsed, or validated."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load manifest from {source}: {reason}")


class ClaimStoreError(LedgerError):
    """The claim sequence violates a store invariant (e.g. duplicate ids)."""


class NotLoadedError(LedgerError):
    """A view was requested before the claim store finished loading."""
