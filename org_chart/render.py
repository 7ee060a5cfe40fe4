import logging
import re

from graphviz import Digraph

from .config import DEFAULT_POSITION, FONT, OUTPUT_FILE, OUTPUT_FORMAT, PALETTE, RANKDIR, THEMES
from .forest import iter_nodes

logger = logging.getLogger(__name__)


# -------------------------------------------
# HELPERS
# -------------------------------------------
def build_label(node, default_position=DEFAULT_POSITION):
    """Compact node label: Name + Title."""
    return f"{node.name}\n{node.position or default_position}"


def safe_name(s: str) -> str:
    """Make a string safe for use as a Graphviz ID or filename suffix."""
    return re.sub(r"[^A-Za-z0-9]+", "_", s or "").strip("_") or "Unknown"


def unique_names(labels):
    """safe_name for each label, suffixed _2, _3, ... where two labels collide."""
    names = []
    seen = set()
    for label in labels:
        base = name = safe_name(label)
        n = 1
        while name in seen:
            n += 1
            name = f"{base}_{n}"
        seen.add(name)
        names.append(name)
    return names


def department_colors(forest, palette=PALETTE):
    """Department -> fill colour, departments sorted, palette reused cyclically."""
    departments = sorted({node.department for node in iter_nodes(forest) if node.department})
    return {dept: palette[i % len(palette)] for i, dept in enumerate(departments)}


def _theme(name):
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme {name!r}; expected one of {sorted(THEMES)}") from None


def _new_digraph(title, rankdir, colors, fmt):
    dot = Digraph(comment=title, format=fmt)

    dot.graph_attr.update(
        rankdir=rankdir,
        splines="ortho",
        fontsize="10",
        fontname=FONT,
        fontcolor=colors["font_color"],
        labelloc="t",
        label=title,
        pad="0.1",
        margin="0.05",
        nodesep="0.25",
        ranksep="0.4",
        bgcolor=colors["bgcolor"],
    )

    dot.node_attr.update(
        shape="box",
        style="rounded,filled",
        fillcolor=colors["node_fill"],
        color=colors["node_border"],
        fontcolor=colors["font_color"],
        fontname=FONT,
        fontsize="9",
        margin="0.12,0.06",
    )

    dot.edge_attr.update(
        color=colors["edge_color"],
        arrowsize="0.7",
    )
    return dot


def _add_forest(graph, forest, colors, dept_colors, prefix=""):
    # Generated keys; raw ids may contain ":" which graphviz reads as a port
    roots = set(forest)
    keys = {node: f"{prefix}n{i}" for i, node in enumerate(iter_nodes(forest))}

    for node, uid in keys.items():
        if node in roots:
            # Top person(s) - slightly emphasized
            fill = dept_colors.get(node.department, colors["root_fill"])
            graph.node(uid, label=build_label(node), fillcolor=fill, tooltip=node.id,
                       style="rounded,filled,bold", penwidth="1.5")
        else:
            fill = dept_colors.get(node.department, colors["node_fill"])
            graph.node(uid, label=build_label(node), fillcolor=fill, tooltip=node.id)

    for node, uid in keys.items():
        for child in node.children:
            graph.edge(uid, keys[child])


def _add_legend(dot, dept_colors):
    with dot.subgraph(name="cluster_legend") as c:
        c.attr(label="Departments", style="rounded", fontsize="9")
        for i, (dept, color) in enumerate(dept_colors.items()):
            c.node(f"legend_{i}", label=dept, fillcolor=color, shape="note")


# -------------------------------------------
# DIGRAPHS
# -------------------------------------------
def forest_to_digraph(forest, title="Org Chart", rankdir=RANKDIR, theme="light",
                      fmt=OUTPUT_FORMAT, legend=True):
    colors = _theme(theme)
    dept_colors = department_colors(forest)

    dot = _new_digraph(title, rankdir, colors, fmt)
    _add_forest(dot, forest, colors, dept_colors)
    if legend and dept_colors:
        _add_legend(dot, dept_colors)
    return dot


def groups_to_digraph(groups, title="Org Chart", rankdir=RANKDIR, theme="light",
                      fmt=OUTPUT_FORMAT, legend=True):
    """One cluster per group label, in the order the groups are given."""
    colors = _theme(theme)
    all_nodes = [root for forest in groups.values() for root in forest]
    dept_colors = department_colors(all_nodes)

    dot = _new_digraph(title, rankdir, colors, fmt)
    clusters = unique_names(groups)
    for (label, forest), cluster in zip(groups.items(), clusters):
        with dot.subgraph(name=f"cluster_{cluster}") as c:
            # Group frame
            c.attr(
                label=label,
                style="rounded",
                color=colors["node_border"],
                penwidth="1.4",
                fontsize="10",
                fontname=FONT,
            )
            _add_forest(c, forest, colors, dept_colors, prefix=f"{cluster}__")

    if legend and dept_colors:
        _add_legend(dot, dept_colors)
    return dot


def render_digraph(dot, filename=OUTPUT_FILE, fmt=None):
    """Write the chart image (needs the Graphviz binaries) and return its path."""
    output_path = dot.render(filename=filename, format=fmt, cleanup=True)
    logger.info("Org chart generated: %s", output_path)
    return output_path


# -------------------------------------------
# TEXT
# -------------------------------------------
def format_tree(forest, indent="    "):
    """Indented plain-text outline of the forest."""
    lines = []
    stack = [(node, 0) for node in reversed(forest)]

    while stack:
        node, depth = stack.pop()
        text = f"{node.name} ({node.position})" if node.position else node.name
        lines.append(f"{indent * depth}{text}")
        stack.extend((child, depth + 1) for child in reversed(node.children))

    return "\n".join(lines)
