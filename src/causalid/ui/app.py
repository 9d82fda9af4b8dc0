"""
causalid Streamlit Web Application.

Paste a causal graph as an edge list, pick a treatment and an outcome,
and see which identification method applies.
"""

import streamlit as st
import streamlit.components.v1 as components

from causalid.causal.identification import IdentificationConfig, IdentificationEngine
from causalid.causal.selection import bounded_subsets, parent_subsets
from causalid.core.graph import make_graph
from causalid.ui.formatting import format_badge, parse_edge_list, render_graph_html

EXAMPLE_EDGES = """# confounded treatment with a mediator
U -> X
U -> Y
X -> M
M -> Y
"""


# --- Session State Helpers ---
def init_session():
    """Initialize session state."""
    if "edges_text" not in st.session_state:
        st.session_state.edges_text = EXAMPLE_EDGES


def render_app():
    """Render main application."""
    with st.sidebar:
        st.markdown("### Settings")
        strategy = st.selectbox(
            "Candidate sets",
            ["All subsets up to size k", "Subsets of treatment parents"],
            index=0,
        )
        max_size = st.slider("k (max candidate size)", 0, 5, 2)
        validate = st.checkbox("Reject cyclic graphs", value=True)

    st.title("causalid")
    st.markdown("*Graphical identification of causal effects*")

    edges_text = st.text_area("Edges (one per line)", key="edges_text", height=200)

    try:
        graph = make_graph(parse_edge_list(edges_text), validate=validate)
    except ValueError as e:
        st.error(str(e))
        return

    if graph.node_count < 2:
        st.info("Add at least one edge to analyze the graph")
        return

    node_ids = sorted(graph.nodes)
    col_x, col_y = st.columns(2)
    treatment = col_x.selectbox("Treatment (X)", node_ids, index=node_ids.index("X") if "X" in node_ids else 0)
    outcome = col_y.selectbox("Outcome (Y)", node_ids, index=node_ids.index("Y") if "Y" in node_ids else len(node_ids) - 1)

    if treatment == outcome:
        st.warning("Treatment and outcome must differ")
        return

    generator = parent_subsets if strategy.startswith("Subsets of treatment") else bounded_subsets(max_size)
    engine = IdentificationEngine(
        graph,
        config=IdentificationConfig(max_candidate_size=max_size),
        candidate_generator=generator,
    )
    result = engine.identify(treatment, outcome)

    label, color = format_badge(result)
    st.markdown(
        f'<span style="background: {color}; color: white; padding: 0.3rem 0.8rem; '
        f'border-radius: 1rem;">{label}</span>',
        unsafe_allow_html=True,
    )

    with st.expander("Causal Graph", expanded=True):
        components.html(render_graph_html(graph, treatment, outcome, result), height=420)

    with st.expander("Result JSON"):
        st.json(result.to_dict())


def main():
    """Main entry point."""
    st.set_page_config(
        page_title="causalid",
        layout="wide",
    )

    init_session()
    render_app()


if __name__ == "__main__":
    main()
