"""Marker click → list card: scroll into view and pulse a highlight."""

from typing import Dict

from ledger.logging_config import get_logger
from ledger.services.claim_list import ClaimListView
from ledger.utils.scheduler import Cancellable, Scheduler

logger = get_logger(__name__)


class SelectionBridge:
    def __init__(
        self,
        list_view: ClaimListView,
        scheduler: Scheduler,
        highlight_seconds: float = 2.0,
    ):
        self._list = list_view
        self._scheduler = scheduler
        self._highlight_seconds = highlight_seconds
        self._pending: Dict[str, Cancellable] = {}

    def select_marker(self, claim_id: str) -> bool:
        """Reveal and highlight the card for ``claim_id``.

        A missing card (filtered out, or never rendered) is a no-op.
        Returns whether a card was found.
        """
        if self._list.find_card(claim_id) is None:
            logger.debug("selection_target_missing", claim_id=claim_id)
            return False

        self._list.scroll_into_view(claim_id)
        self._list.set_highlight(claim_id, True)

        # Re-selecting restarts the highlight window
        previous = self._pending.pop(claim_id, None)
        if previous is not None:
            previous.cancel()
        self._pending[claim_id] = self._scheduler.call_later(
            self._highlight_seconds, lambda: self._clear(claim_id)
        )
        logger.info("claim_selected", claim_id=claim_id)
        return True

    def _clear(self, claim_id: str) -> None:
        self._pending.pop(claim_id, None)
        self._list.set_highlight(claim_id, False)
