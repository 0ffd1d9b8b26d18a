"""UI state controllers and the claim list view."""

from ledger.services.claim_list import ClaimCard, ClaimListView, ListState
from ledger.services.selection_bridge import SelectionBridge
from ledger.services.threshold_controller import ThresholdController
from ledger.services.tooltip_controller import Tooltip, TooltipController

__all__ = [
    "ClaimCard",
    "ClaimListView",
    "ListState",
    "SelectionBridge",
    "ThresholdController",
    "Tooltip",
    "TooltipController",
]
