"""
Display helpers for identification results.

Pure functions shared by the Streamlit page: parsing a pasted edge list,
choosing a badge for a result, and rendering the graph as vis.js HTML.
Nothing here imports Streamlit.
"""

import json
import re

from causalid.causal.identification import IdentificationMethod, IdentificationResult
from causalid.core.graph import CausalGraph

_EDGE_SEPARATOR = re.compile(r"\s*(?:->|→|,)\s*")

BADGE_COLORS = {
    IdentificationMethod.BACKDOOR: "#28a745",
    IdentificationMethod.FRONTDOOR: "#17a2b8",
    IdentificationMethod.G_FORMULA: "#007bff",
    IdentificationMethod.UNIDENTIFIABLE: "#dc3545",
}

ROLE_COLORS = {
    "treatment": "#ffc107",
    "outcome": "#dc3545",
    "adjustment": "#28a745",
    "other": "#6c757d",
}


def parse_edge_list(text: str) -> list[tuple[str, str]]:
    """Parse one edge per line, written ``U -> X``, ``U → X`` or ``U, X``.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        ValueError: If a line does not contain exactly two node names
    """
    pairs: list[tuple[str, str]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = _EDGE_SEPARATOR.split(line)
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Line {lineno}: expected 'source -> target', got {raw!r}")
        pairs.append((parts[0], parts[1]))
    return pairs


def format_badge(result: IdentificationResult) -> tuple[str, str]:
    """Label and colour for the diagnostic badge of a result."""
    label = result.method.value
    if result.method is not IdentificationMethod.UNIDENTIFIABLE:
        members = ", ".join(sorted(result.adjustment_set)) or "∅"
        label = f"{label}: {{{members}}}"
    elif result.notes:
        label = f"{label} ({'; '.join(result.notes)})"
    return label, BADGE_COLORS[result.method]


def node_role(
    node_id: str,
    treatment: str | None,
    outcome: str | None,
    result: IdentificationResult | None,
) -> str:
    if node_id == treatment:
        return "treatment"
    if node_id == outcome:
        return "outcome"
    if result is not None and node_id in result.adjustment_set:
        return "adjustment"
    return "other"


_VIS_JS = "https://unpkg.com/vis-network/standalone/umd/vis-network.min.js"

# Causes above effects, drawn without physics so the layout is stable.
GRAPH_OPTIONS = {
    "layout": {"hierarchical": {"direction": "UD", "sortMethod": "directed"}},
    "physics": False,
    "edges": {"arrows": "to", "color": "#666"},
}


def render_graph_html(
    graph: CausalGraph,
    treatment: str | None = None,
    outcome: str | None = None,
    result: IdentificationResult | None = None,
    height: int = 400,
) -> str:
    """Render the graph as interactive HTML using vis.js.

    The treatment, outcome and any selected adjustment set are coloured
    by role.
    """
    nodes = []
    for node_id in graph.nodes:
        role = node_role(node_id, treatment, outcome, result)
        nodes.append({"id": node_id, "label": node_id, "color": ROLE_COLORS[role], "title": role})

    edges = [{"from": edge.source_id, "to": edge.target_id} for edge in graph.edges]
    data = json.dumps({"nodes": nodes, "edges": edges})

    return (
        f'<script src="{_VIS_JS}"></script>'
        f'<div id="graph" style="height: {height}px; border: 1px solid #ddd;"></div>'
        "<script>"
        f"new vis.Network(document.getElementById('graph'), {data}, {json.dumps(GRAPH_OPTIONS)});"
        "</script>"
    )
