"""The single hover tooltip shared by every funnel marker."""

from dataclasses import dataclass
from typing import Optional

from ledger.logging_config import get_logger
from ledger.schemas.claim import Claim
from ledger.schemas.scene import Point

logger = get_logger(__name__)


@dataclass
class Tooltip:
    visible: bool = False
    claim_id: Optional[str] = None
    title: str = ""
    confidence_text: str = ""
    grade_text: str = ""
    left: float = 0.0
    top: float = 0.0


class TooltipController:
    """Owns the one Tooltip instance; the last marker entered owns it.

    ``hide(owner=...)`` from a marker that has already lost ownership is
    ignored, so a late leave event from one marker cannot hide the tooltip
    a neighbouring marker just showed.
    """

    def __init__(self, offset: float = 15.0):
        self._offset = offset
        self._tooltip = Tooltip()

    @property
    def tooltip(self) -> Tooltip:
        return self._tooltip

    @property
    def owner(self) -> Optional[str]:
        return self._tooltip.claim_id if self._tooltip.visible else None

    def show(self, claim: Claim, pointer: Optional[Point] = None) -> Tooltip:
        tip = self._tooltip
        tip.claim_id = claim.id
        tip.title = claim.title
        tip.confidence_text = f"{claim.confidence_percent}% confident"
        tip.grade_text = f"Grade {claim.grade_display}"
        tip.visible = True
        if pointer is not None:
            self.move(pointer)
        return tip

    def move(self, pointer: Optional[Point]) -> None:
        if pointer is None:
            return
        self._tooltip.left = pointer.x + self._offset
        self._tooltip.top = pointer.y + self._offset

    def hide(self, owner: Optional[str] = None) -> bool:
        """Hide the tooltip. Safe to call when already hidden.

        Returns whether the tooltip went from visible to hidden.
        """
        tip = self._tooltip
        if not tip.visible:
            return False
        if owner is not None and owner != tip.claim_id:
            logger.debug("tooltip_hide_ignored", owner=owner, current=tip.claim_id)
            return False
        tip.visible = False
        tip.claim_id = None
        return True
