"""Tests for SVG and HTML rendering of the scene and the claim list."""

from ledger.rendering.html import render_claim_card, render_claim_list, render_page, render_tooltip
from ledger.rendering.svg import render_svg
from ledger.schemas.claim import Claim
from ledger.schemas.scene import Point
from ledger.services.claim_list import ClaimCard, ClaimListView
from ledger.services.tooltip_controller import TooltipController


class TestSvg:
    def test_draw_order(self, renderer, claims):
        svg = render_svg(renderer.render(claims, 0.7))

        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert svg.index("<path") < svg.index("<text") < svg.index("<circle")
        assert svg.count("<path") == 3

    def test_marker_attributes(self, renderer, claims):
        svg = render_svg(renderer.render(claims, 0.7))

        assert 'data-claim-id="c-4" data-interactive="true" style="opacity: 1; cursor: pointer' in svg
        assert 'data-claim-id="2" data-interactive="false" style="opacity: 0.2; cursor: default' in svg
        assert "<title>Hearing testimony mostly supportive (55%)</title>" in svg

    def test_zone_labels(self, renderer, claims):
        svg = render_svg(renderer.render(claims, 0.7))

        for text in ("V1: SPECULATION", "V2: TESTING", "V3: CONFIRMED", "70-100% confidence"):
            assert text in svg

    def test_markup_is_escaped(self, renderer):
        claim = Claim(id="x<1>", title='Ban "loud" <b>mufflers</b>', confidence=0.8)
        svg = render_svg(renderer.render([claim], 0.7))

        assert "<b>" not in svg
        assert 'data-claim-id="x&lt;1&gt;"' in svg


class TestClaimCards:
    def test_card_with_evidence_link(self, claims):
        html = render_claim_card(ClaimCard(claims[0]))

        assert html.startswith('<article class="claim" data-claim-id="1"')
        assert 'class="grade grade-a"' in html
        assert "90% confident" in html
        assert "View Evidence →" in html

    def test_card_without_grade_or_file(self, claims):
        c5 = next(c for c in claims if c.id == "c-5")
        html = render_claim_card(ClaimCard(c5, highlighted=True))

        assert 'class="claim highlight"' in html
        assert 'class="grade grade-na">N/A<' in html
        assert "View Evidence" not in html

    def test_plus_grade_slug(self, claims):
        c3 = next(c for c in claims if c.id == "c-3")
        assert "grade-bplus" in render_claim_card(ClaimCard(c3))


class TestClaimList:
    def test_loading_state(self):
        assert 'class="loading"' in render_claim_list(ClaimListView())

    def test_cards_in_confidence_order(self, claims):
        view = ClaimListView()
        view.render(claims, 0.7)
        html = render_claim_list(view)

        positions = [html.index(f'data-claim-id="{cid}"') for cid in ("c-4", "1", "c-3")]
        assert positions == sorted(positions)

    def test_empty_state(self, claims):
        view = ClaimListView()
        view.render([c for c in claims if c.confidence < 0.5], 0.85)
        html = render_claim_list(view)

        assert "No claims meet 85% threshold" in html
        assert "Try lowering the confidence threshold" in html

    def test_error_state(self):
        view = ClaimListView()
        view.show_error()
        assert render_claim_list(view) == (
            '<p class="error">Error loading claims. Please refresh the page.</p>'
        )


class TestTooltipAndPage:
    def test_hidden_tooltip_renders_nothing(self):
        assert render_tooltip(TooltipController().tooltip) == ""

    def test_visible_tooltip(self, claims):
        controller = TooltipController(offset=15)
        controller.show(claims[0], Point(100, 200))
        html = render_tooltip(controller.tooltip)

        assert "left: 115px; top: 215px" in html
        assert "90% confident" in html
        assert "Grade A" in html

    def test_page_without_scene(self):
        view = ClaimListView()
        view.show_error()
        html = render_page(view, 70)

        assert '<section id="funnel-container"></section>' in html
        assert 'value="70"' in html
        assert "Error loading claims" in html
