from collections.abc import Sequence

import networkx as nx
import numpy as np

from .schedule import Schedule


def to_networkx(network: np.ndarray, names: Sequence[str] | None = None) -> nx.Graph:
    network = np.asarray(network)
    g = nx.Graph()
    for i in range(len(network)):
        g.add_node(i, name=names[i] if names is not None else str(i))
    rows, cols = np.nonzero(np.triu(network, 1))
    g.add_edges_from((i, j, {"weight": int(network[i, j])}) for i, j in zip(rows.tolist(), cols.tolist()))
    return g


def from_networkx(g: nx.Graph, weight: str = "weight") -> tuple[np.ndarray, list[str]]:
    """Matrix and names of an undirected graph, nodes in insertion order

    Edges without the weight attribute count as weight 1. Names come from the
    `name` node attribute, falling back to the node itself.
    """
    nodes = list(g.nodes())
    index = {node: i for i, node in enumerate(nodes)}
    network = np.zeros((len(nodes), len(nodes)), dtype=np.int64)
    for u, v, data in g.edges(data=True):
        if u == v:
            continue
        network[index[u], index[v]] = network[index[v], index[u]] = int(data.get(weight, 1))
    names = [str(g.nodes[node].get("name", node)) for node in nodes]
    return network, names


def draw_network(
    network: np.ndarray,
    names: Sequence[str] | None = None,
    schedule: Schedule | None = None,
    with_edge_labels: bool = True,
):
    """Draw the network, colouring each relationship by the first day it is met on"""
    g = to_networkx(network, names)
    pos = nx.circular_layout(g)
    first_day: dict[tuple[int, int], int] = {}
    if schedule is not None:
        for number, day in enumerate(schedule):
            for meetup in day:
                first_day.setdefault(meetup, number)
    edge_color = [first_day.get((min(u, v), max(u, v)), -1) for u, v in g.edges()]
    nx.draw(
        g,
        pos,
        labels=nx.get_node_attributes(g, "name"),
        with_labels=True,
        edge_color=edge_color,
    )
    if with_edge_labels:
        nx.draw_networkx_edge_labels(g, pos, edge_labels=nx.get_edge_attributes(g, "weight"))
