"""Pyvis-based rendering of a hypernym neighbourhood."""

from pathlib import Path

from .classify import EdgeType


def _node_color(synset: int, ancestor: int | None, sources: set[int]) -> str:
    if synset == ancestor:
        return "#ffd43b"  # yellow
    if synset in sources:
        return "#87CEEB"  # light blue
    return "#e9ecef"  # light gray


def render_graph(
    positions: dict[int, tuple[float, float]],
    classified_edges: dict[EdgeType, list[tuple[int, int]]],
    labels: dict[int, str],
    output_path: Path,
    tooltips: dict[int, str] | None = None,
    ancestor: int | None = None,
    sources: set[int] | None = None,
    title: str | None = None,
) -> None:
    """Render graph with pyvis.

    Args:
        positions: (x, y) position for each synset.
        classified_edges: Edges classified by type.
        labels: Short label for each synset.
        output_path: Path to write the HTML file.
        tooltips: Optional hover text for each synset.
        ancestor: Optional synset to highlight as the common ancestor.
        sources: Optional queried synsets to highlight.
        title: Optional heading shown above the graph.
    """
    from pyvis.network import Network

    tooltips = tooltips or {}
    sources = sources or set()

    net = Network(
        height="100vh",
        width="100%",
        bgcolor="#ffffff",
        directed=True,
        heading=title or "",
    )
    net.toggle_physics(False)

    for synset, (x, y) in positions.items():
        net.add_node(
            synset,
            label=labels.get(synset, str(synset)),
            title=tooltips.get(synset, str(synset)),
            x=x,
            y=y,
            fixed=True,
            color=_node_color(synset, ancestor, sources),
            shape="box",
            borderWidth=3 if synset == ancestor else 1,
            font={"size": 12},
        )

    edge_styles = {
        EdgeType.PATH: {"color": "#ff6b6b", "width": 3},  # red
        EdgeType.HYPERNYM: {"color": "#cccccc", "width": 1},  # light gray
    }

    for edge_type, edge_list in classified_edges.items():
        style = edge_styles[edge_type]
        for synset, hypernym in edge_list:
            if synset not in positions or hypernym not in positions:
                continue
            net.add_edge(synset, hypernym, color=style["color"], width=style["width"])

    net.set_options("""
    {
        "physics": {"enabled": false},
        "interaction": {
            "navigationButtons": true,
            "zoomView": true,
            "dragView": true,
            "hover": true,
            "tooltipDelay": 100
        },
        "edges": {
            "arrows": {"to": {"enabled": true, "scaleFactor": 0.5}},
            "smooth": {"type": "continuous"}
        }
    }
    """)

    net.save_graph(str(output_path))
