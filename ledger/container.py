"""Dependency Injection Container.

Centralized definition of the navigator's components using
dependency-injector. The process-wide UI state (threshold, tooltip, list,
scene) lives in singletons here and is handed to consumers by reference.

Usage::

    from ledger.container import AppContainer

    container = AppContainer()
    navigator = container.navigator()
    await navigator.load()
"""

from dependency_injector import containers, providers

from ledger.clients.manifest_client import ManifestClient
from ledger.config import Settings
from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.engines.geometry import FunnelGeometry
from ledger.engines.position_mapper import PositionMapper, RandomJitter
from ledger.navigator import CertaintyNavigator
from ledger.services.claim_list import ClaimListView
from ledger.services.selection_bridge import SelectionBridge
from ledger.services.threshold_controller import ThresholdController
from ledger.services.tooltip_controller import TooltipController
from ledger.utils.scheduler import ManualScheduler


class AppContainer(containers.DeclarativeContainer):
    """Application Dependency Injection Container.

    - Configuration (Settings)
    - Layout (jitter, position mapper, geometry)
    - UI state (threshold, tooltip, list view, scheduler)
    - Glue (selection bridge, funnel renderer, navigator)
    """

    # ══════════════════════════════════════════════════════════════════
    # CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    settings = providers.Singleton(Settings)

    # ══════════════════════════════════════════════════════════════════
    # LAYOUT
    # ══════════════════════════════════════════════════════════════════

    jitter = providers.Singleton(
        RandomJitter,
        seed=settings.provided.jitter_seed,
    )

    position_mapper = providers.Singleton(
        PositionMapper,
        jitter=jitter,
    )

    geometry = providers.Singleton(
        FunnelGeometry.default,
        mapper=position_mapper,
    )

    # ══════════════════════════════════════════════════════════════════
    # UI STATE (one instance per container)
    # ══════════════════════════════════════════════════════════════════

    scheduler = providers.Singleton(ManualScheduler)

    threshold_controller = providers.Singleton(
        ThresholdController,
        initial=settings.provided.default_threshold,
    )

    tooltip_controller = providers.Singleton(
        TooltipController,
        offset=settings.provided.tooltip_offset,
    )

    claim_list_view = providers.Singleton(ClaimListView)

    # ══════════════════════════════════════════════════════════════════
    # GLUE
    # ══════════════════════════════════════════════════════════════════

    selection_bridge = providers.Singleton(
        SelectionBridge,
        list_view=claim_list_view,
        scheduler=scheduler,
        highlight_seconds=settings.provided.highlight_seconds,
    )

    funnel_renderer = providers.Singleton(
        FunnelRenderer,
        geometry=geometry,
        mapper=position_mapper,
        tooltip=tooltip_controller,
        selection=selection_bridge,
    )

    manifest_client = providers.Factory(
        ManifestClient,
        url=settings.provided.manifest_url,
        path=settings.provided.manifest_path,
        timeout=settings.provided.manifest_timeout,
    )

    navigator = providers.Singleton(
        CertaintyNavigator,
        manifest_client=manifest_client,
        renderer=funnel_renderer,
        threshold=threshold_controller,
        list_view=claim_list_view,
        tooltip=tooltip_controller,
        scheduler=scheduler,
    )
