"""Scene graph → SVG markup."""

from html import escape

from ledger.schemas.scene import Marker, SceneGraph, TextLabel, ZoneShape

SVG_NS = "http://www.w3.org/2000/svg"


def _zone(shape: ZoneShape) -> str:
    return (
        f'<path d="{shape.path}" fill="{shape.fill}" stroke="{shape.stroke}" '
        f'stroke-width="{shape.stroke_width}" data-label="{escape(shape.name)}"/>'
    )


def _label(label: TextLabel) -> str:
    return (
        f'<text x="{label.x:g}" y="{label.y:g}" text-anchor="middle" '
        f'font-size="{label.size}" fill="{label.fill}">{escape(label.text)}</text>'
    )


def _marker(marker: Marker) -> str:
    style = f"opacity: {marker.opacity:g}; cursor: {marker.cursor}"
    if marker.transition:
        style += f"; transition: {marker.transition}"
    return (
        f'<circle cx="{marker.position.x:.2f}" cy="{marker.position.y:.2f}" '
        f'r="{marker.radius}" fill="{marker.fill}" stroke="#fff" stroke-width="2" '
        f'class="claim-dot" data-claim-id="{escape(marker.claim_id)}" '
        f'data-interactive="{str(marker.interactive).lower()}" style="{style}">'
        f"<title>{escape(marker.label)}</title></circle>"
    )


def render_svg(scene: SceneGraph) -> str:
    """Serialize ``scene`` to a standalone ``<svg>`` element.

    Draw order matters: zones, then labels, then markers on top.
    """
    parts = [
        f'<svg xmlns="{SVG_NS}" width="100%" height="{scene.height}" '
        f'viewBox="0 0 {scene.width} {scene.height}">'
    ]
    parts += [_zone(z) for z in scene.zones]
    parts += [_label(l) for l in scene.labels]
    parts += [_marker(m) for m in scene.markers.values()]
    parts.append("</svg>")
    return "".join(parts)
