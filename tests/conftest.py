"""Shared test fixtures.

Every test gets fresh UI state (threshold, tooltip, list, scheduler) and a
seeded jitter so marker positions are reproducible.
"""

import pytest

from ledger.clients.manifest_client import ManifestClient
from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.engines.geometry import FunnelGeometry
from ledger.engines.position_mapper import PositionMapper, RandomJitter
from ledger.navigator import CertaintyNavigator
from ledger.repositories.claim_store import ClaimStore
from ledger.schemas.claim import Claim, Manifest
from ledger.services.claim_list import ClaimListView
from ledger.services.selection_bridge import SelectionBridge
from ledger.services.threshold_controller import ThresholdController
from ledger.services.tooltip_controller import TooltipController
from ledger.utils.scheduler import ManualScheduler
from tests.fixtures import FIXTURES_DIR, load_fixture


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ── Data ────────────────────────────────────────────────────────────────

@pytest.fixture()
def manifest() -> Manifest:
    return Manifest.model_validate(load_fixture("manifest.json"))


@pytest.fixture()
def claims(manifest: Manifest) -> list[Claim]:
    return list(manifest.claims)


@pytest.fixture()
def store(manifest: Manifest) -> ClaimStore:
    return ClaimStore.from_manifest(manifest)


@pytest.fixture()
def manifest_path() -> str:
    return str(FIXTURES_DIR / "manifest.json")


# ── Layout ──────────────────────────────────────────────────────────────

@pytest.fixture()
def mapper() -> PositionMapper:
    return PositionMapper(jitter=RandomJitter(seed=42))


@pytest.fixture()
def geometry(mapper: PositionMapper) -> FunnelGeometry:
    return FunnelGeometry.default(mapper)


# ── UI state ────────────────────────────────────────────────────────────

@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def scheduler(clock: FakeClock) -> ManualScheduler:
    return ManualScheduler(clock=clock)


@pytest.fixture()
def list_view() -> ClaimListView:
    return ClaimListView()


@pytest.fixture()
def tooltip() -> TooltipController:
    return TooltipController(offset=15.0)


@pytest.fixture()
def threshold() -> ThresholdController:
    return ThresholdController(initial=0.70)


@pytest.fixture()
def selection(list_view: ClaimListView, scheduler: ManualScheduler) -> SelectionBridge:
    return SelectionBridge(list_view, scheduler, highlight_seconds=2.0)


@pytest.fixture()
def renderer(geometry, mapper, tooltip, selection) -> FunnelRenderer:
    return FunnelRenderer(geometry, mapper, tooltip=tooltip, selection=selection)


@pytest.fixture()
def navigator(
    manifest_path, renderer, threshold, list_view, tooltip, scheduler
) -> CertaintyNavigator:
    return CertaintyNavigator(
        manifest_client=ManifestClient(path=manifest_path),
        renderer=renderer,
        threshold=threshold,
        list_view=list_view,
        tooltip=tooltip,
        scheduler=scheduler,
    )
