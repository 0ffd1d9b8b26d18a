"""Serializers from scene graph / list state to SVG and HTML."""

from ledger.rendering.html import render_claim_card, render_claim_list, render_page
from ledger.rendering.svg import render_svg

__all__ = ["render_claim_card", "render_claim_list", "render_page", "render_svg"]
