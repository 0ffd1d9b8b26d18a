"""The claim list: a threshold-filtered, confidence-sorted projection.

The list never touches the store's ordering; every render derives a new
card sequence. Cards are keyed by claim id, which is how the selection
bridge finds them.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ledger.logging_config import get_logger
from ledger.schemas.claim import Claim, to_percent

logger = get_logger(__name__)

ERROR_MESSAGE = "Error loading claims. Please refresh the page."
EMPTY_HINT = "Try lowering the confidence threshold"


def empty_message(threshold: float) -> str:
    return f"No claims meet {to_percent(threshold)}% threshold"


@dataclass
class ClaimCard:
    claim: Claim
    highlighted: bool = False


@dataclass(frozen=True)
class ListState:
    kind: str  # "loading", "cards", "empty" or "error"
    message: Optional[str] = None
    hint: Optional[str] = None


class ClaimListView:
    def __init__(self):
        self._cards: Dict[str, ClaimCard] = {}
        self._state = ListState("loading")
        self._scrolled_to: Optional[str] = None
        self.total_count = 0

    # ── rendering ────────────────────────────────────────────────────

    def render(self, claims: Sequence[Claim], threshold: float) -> List[ClaimCard]:
        qualifying = sorted(
            (c for c in claims if c.qualifies(threshold)),
            key=lambda c: c.confidence,
            reverse=True,
        )
        previous = self._cards
        self._cards = {
            c.id: ClaimCard(c, highlighted=c.id in previous and previous[c.id].highlighted)
            for c in qualifying
        }
        self.total_count = len(claims)
        if self._cards:
            self._state = ListState("cards")
        else:
            self._state = ListState("empty", empty_message(threshold), EMPTY_HINT)
        return self.cards

    def show_error(self, message: str = ERROR_MESSAGE) -> None:
        self._cards = {}
        self._state = ListState("error", message)

    # ── queries ──────────────────────────────────────────────────────

    @property
    def cards(self) -> List[ClaimCard]:
        return list(self._cards.values())

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def visible_count(self) -> int:
        return len(self._cards)

    @property
    def scrolled_to(self) -> Optional[str]:
        return self._scrolled_to

    def find_card(self, claim_id: str) -> Optional[ClaimCard]:
        return self._cards.get(claim_id)

    # ── effects used by the selection bridge ─────────────────────────

    def scroll_into_view(self, claim_id: str) -> bool:
        if claim_id not in self._cards:
            return False
        self._scrolled_to = claim_id
        return True

    def set_highlight(self, claim_id: str, on: bool) -> bool:
        card = self._cards.get(claim_id)
        if card is None:
            return False
        card.highlighted = on
        return True
