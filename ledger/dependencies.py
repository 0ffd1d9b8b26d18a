"""Dependency factories for FastAPI.

The claim store is loaded once at startup (see ``ledger.main.lifespan``)
and parked on ``app.state``. Renderers are built per request: the HTTP
surface is stateless, so every response is a fresh projection of the
store at the requested threshold.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Request

from ledger.clients.manifest_client import ManifestClient
from ledger.config import Settings
from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.engines.geometry import FunnelGeometry
from ledger.engines.position_mapper import PositionMapper, RandomJitter
from ledger.repositories.claim_store import ClaimStore


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_manifest_client(settings: Settings) -> ManifestClient:
    return ManifestClient(
        url=settings.manifest_url,
        path=settings.manifest_path,
        timeout=settings.manifest_timeout,
    )


async def load_claim_store(settings: Settings) -> ClaimStore:
    """Fetch the manifest and freeze it into a store.

    Raises:
        ManifestLoadError, ClaimStoreError: propagated to the caller.
    """
    manifest = await build_manifest_client(settings).fetch()
    return ClaimStore.from_manifest(manifest)


# ── Per-request ─────────────────────────────────────────────────────────

def get_optional_claim_store(request: Request) -> Optional[ClaimStore]:
    return getattr(request.app.state, "claim_store", None)


def get_claim_store(
    request: Request,
    store: Optional[ClaimStore] = Depends(get_optional_claim_store),
) -> ClaimStore:
    if store is None:
        reason = getattr(request.app.state, "load_error", None) or "Claims not loaded"
        raise HTTPException(status_code=503, detail=reason)
    return store


def get_funnel_renderer(settings: Settings = Depends(get_settings)) -> FunnelRenderer:
    mapper = PositionMapper(jitter=RandomJitter(settings.jitter_seed))
    return FunnelRenderer(FunnelGeometry.default(mapper), mapper)


def resolve_threshold(value: Optional[float], settings: Settings) -> float:
    return settings.default_threshold if value is None else value
