"""Page and claim-card HTML.

Cards carry ``data-claim-id`` so the selection bridge (and the browser)
can find the card that belongs to a funnel marker.
"""

from html import escape
from typing import Optional

from ledger.rendering.svg import render_svg
from ledger.schemas.scene import SceneGraph
from ledger.services.claim_list import ClaimCard, ClaimListView
from ledger.services.tooltip_controller import Tooltip


def render_claim_card(card: ClaimCard) -> str:
    claim = card.claim
    classes = "claim highlight" if card.highlighted else "claim"
    meta = [
        f'<span class="grade grade-{escape(claim.grade_slug)}">{escape(claim.grade_display)}</span>',
        f'<span class="confidence">{claim.confidence_percent}% confident</span>',
    ]
    if claim.domain:
        meta.append(f'<span class="domain">{escape(claim.domain)}</span>')
    actions = ""
    if claim.file:
        actions = (
            '<div class="claim-actions">'
            f'<a href="{escape(claim.file)}" class="btn-primary" target="_blank">View Evidence →</a>'
            "</div>"
        )
    return (
        f'<article class="{classes}" data-claim-id="{escape(claim.id)}" '
        f'data-confidence="{claim.confidence:g}">'
        f'<div class="claim-header"><h3>{escape(claim.title)}</h3>'
        f'<div class="claim-meta">{"".join(meta)}</div></div>'
        f"{actions}</article>"
    )


def render_claim_list(view: ClaimListView) -> str:
    state = view.state
    if state.kind == "error":
        return f'<p class="error">{escape(state.message)}</p>'
    if state.kind == "empty":
        return (
            '<div class="empty-state">'
            f"<p>{escape(state.message)}</p>"
            f'<p class="hint">{escape(state.hint)}</p>'
            "</div>"
        )
    if state.kind == "loading":
        return '<p class="loading">Loading claims…</p>'
    return "".join(render_claim_card(card) for card in view.cards)


def render_tooltip(tooltip: Tooltip) -> str:
    if not tooltip.visible:
        return '<div class="custom-tooltip"></div>'
    return (
        f'<div class="custom-tooltip visible" style="left: {tooltip.left:g}px; top: {tooltip.top:g}px">'
        f"<strong>{escape(tooltip.title)}</strong>"
        f'<div><span class="confidence">{escape(tooltip.confidence_text)}</span> • '
        f'<span class="grade">{escape(tooltip.grade_text)}</span></div>'
        "</div>"
    )


def render_page(
    view: ClaimListView,
    threshold_percent: int,
    scene: Optional[SceneGraph] = None,
    tooltip: Optional[Tooltip] = None,
    title: str = "Legis Ledger",
) -> str:
    """Whole page: counts, slider, funnel container, and the claim list."""
    funnel = render_svg(scene) if scene is not None else ""
    tip = render_tooltip(tooltip) if tooltip is not None else ""
    return (
        "<!DOCTYPE html>"
        f'<html lang="en"><head><meta charset="utf-8"><title>{escape(title)}</title></head>'
        "<body>"
        f"<header><h1>{escape(title)}</h1>"
        f'<p>Showing <span id="visible-count">{view.visible_count}</span> of '
        f'<span id="total-count">{view.total_count}</span> claims</p>'
        '<form method="get" action="/">'
        '<label for="threshold">Confidence threshold</label>'
        f'<input type="range" id="threshold" name="threshold" min="0" max="100" '
        f'value="{threshold_percent}" onchange="this.form.submit()">'
        f'<span id="threshold-value">{threshold_percent}%</span>'
        '<noscript><button type="submit">Apply</button></noscript>'
        "</form></header>"
        f'<section id="funnel-container">{funnel}</section>'
        f'<section id="claims-list">{render_claim_list(view)}</section>'
        f"{tip}"
        "</body></html>"
    )
