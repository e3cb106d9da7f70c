import networkx as nx
import numpy as np

from disjoint_set.common import _test_element


def _test_graph(graph):
    """A function that makes sure ``graph`` is a :any:`networkx.Graph`
    whose nodes are integers.

    Directed graphs are turned into undirected ones, since the sets built
    from them ignore edge direction.

    Parameters
    ----------
    graph : :any:`networkx.Graph`, :class:`numpy.ndarray`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts.

    Returns
    -------
    :any:`networkx.Graph`

    Raises
    ------
    TypeError
        Raises a :exc:`~TypeError` if ``graph`` cannot be turned into a
        :any:`networkx.Graph` or has a node that is not an integer.
    """
    if isinstance(graph, nx.DiGraph):
        graph = graph.to_undirected(as_view=True)
    elif not isinstance(graph, nx.Graph):
        try:
            graph = nx.Graph(graph)
        except (nx.NetworkXError, TypeError):
            raise TypeError("Couldn't turn graph into a Graph.")

    for v in graph.nodes():
        _test_element(v)
    return graph


def _sorted_edges(g, weight='weight'):
    """Returns the edges of ``g`` sorted by ``weight``.

    Edges without a ``weight`` attribute have weight 1. Loops are dropped
    since they never join two sets.

    Returns
    -------
    list
        A list of ``(n1, n2, weight)`` tuples. The nodes are the ones
        in ``g``, so integers of any size are kept as they are.
    """
    edges = [
        (u, v, d.get(weight, 1))
        for u, v, d in g.edges(data=True) if u != v
    ]
    weights = np.array([e[2] for e in edges], dtype=float)
    order = np.argsort(weights, kind='stable')
    return [(edges[k][0], edges[k][1], weights[k]) for k in order]
