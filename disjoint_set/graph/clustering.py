import logging
import numbers

import networkx as nx
import numpy as np

from disjoint_set.graph.graph_functions import _sorted_edges, _test_graph
from disjoint_set.union_find import DisjointSet


logger = logging.getLogger(__name__)


def graph2disjoint_set(g):
    """Takes a graph and returns the partition of its connected components.

    Parameters
    ----------
    g : :any:`networkx.Graph`, :class:`numpy.ndarray`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts. The nodes
        must be integers. Edge directions are ignored.

    Returns
    -------
    :class:`.DisjointSet`
        A disjoint set containing every node of ``g``, with one set for
        each connected component.

    Examples
    --------
    >>> import disjoint_set as ds
    >>> uf = ds.graph2disjoint_set({0: [1], 1: [2], 3: [4], 5: []})
    >>> uf.num_sets
    3
    >>> uf.connected(0, 2)
    True
    """
    g = _test_graph(g)
    uf = DisjointSet(g.nodes())
    for u, v in g.edges():
        uf.union(u, v)
    return uf


def connected_components(g):
    """Returns the connected components of a graph.

    Parameters
    ----------
    g : :any:`networkx.Graph`, :class:`numpy.ndarray`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts.

    Returns
    -------
    list
        A list of node :class:`sets<set>`, sorted by their smallest node.
    """
    return sorted(graph2disjoint_set(g).sets(), key=min)


def kruskal_mst(g, weight='weight'):
    """Computes a minimum spanning forest using Kruskal's algorithm.

    Edges are considered in increasing order of weight and an edge is kept
    whenever its endpoints are still in different sets.

    Parameters
    ----------
    g : :any:`networkx.Graph`, :class:`numpy.ndarray`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts.
    weight : str (optional, default: ``'weight'``)
        The edge attribute holding the edge weights. Edges without it have
        weight 1.

    Returns
    -------
    :any:`networkx.Graph`
        A graph with every node of ``g`` and the edges of a minimum
        spanning forest. Each edge carries its ``weight`` attribute.

    Examples
    --------
    >>> import networkx as nx
    >>> import disjoint_set as ds
    >>> g = nx.Graph()
    >>> g.add_weighted_edges_from([(0, 1, 4), (1, 2, 1), (0, 2, 2), (2, 3, 7)])
    >>> mst = ds.kruskal_mst(g)
    >>> sorted(mst.edges(data='weight'))
    [(0, 2, 2.0), (1, 2, 1.0), (2, 3, 7.0)]
    """
    g = _test_graph(g)
    uf = DisjointSet(g.nodes())

    mst = nx.Graph()
    mst.add_nodes_from(g.nodes())

    for n1, n2, w in _sorted_edges(g, weight):
        if not uf.connected(n1, n2):
            uf.union(n1, n2)
            mst.add_edge(n1, n2, **{weight: float(w)})
            if uf.num_sets == 1:
                break

    return mst


def max_spacing_clustering(g, k, weight='weight'):
    """Groups the nodes of ``g`` into ``k`` clusters of maximum spacing.

    This is single-link clustering: starting from singleton clusters, the
    two clusters joined by the lightest remaining edge are merged until
    only ``k`` clusters remain. The spacing of the result is the weight of
    the lightest edge joining two different clusters.

    Parameters
    ----------
    g : :any:`networkx.Graph`, :class:`numpy.ndarray`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts.
    k : int
        The number of clusters wanted.
    weight : str (optional, default: ``'weight'``)
        The edge attribute holding the distances. Edges without it have
        distance 1.

    Returns
    -------
    clusters : list
        A list of node :class:`sets<set>`, sorted by their smallest node.
        If ``g`` has more than ``k`` connected components then there are
        more than ``k`` clusters.
    spacing : float
        The smallest distance between two clusters, or ``numpy.inf`` if
        no edge joins two different clusters.

    Raises
    ------
    TypeError
        If ``k`` is not an integer.
    ValueError
        If ``k`` is not between 1 and the number of nodes in ``g``.

    Notes
    -----
    The clusters are the connected components of a minimum spanning
    forest with its ``k - 1`` heaviest edges removed.
    """
    g = _test_graph(g)
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise TypeError("k must be an integer.")
    if not 1 <= k <= g.number_of_nodes():
        msg = "k must be between 1 and {0}, the number of nodes."
        raise ValueError(msg.format(g.number_of_nodes()))

    uf = DisjointSet(g.nodes())
    spacing = np.inf

    for n1, n2, w in _sorted_edges(g, weight):
        if uf.connected(n1, n2):
            continue
        if uf.num_sets == k:
            spacing = float(w)
            break
        uf.union(n1, n2)

    logger.debug("Found %d clusters with spacing %s", uf.num_sets, spacing)
    return sorted(uf.sets(), key=min), spacing
