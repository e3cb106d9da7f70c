"""
.. autosummary::
    :nosignatures:

    connected_components
    graph2disjoint_set
    kruskal_mst
    max_spacing_clustering
"""

from disjoint_set.graph.clustering import (
    connected_components,
    graph2disjoint_set,
    kruskal_mst,
    max_spacing_clustering
)
from disjoint_set.graph.graph_functions import (
    _sorted_edges,
    _test_graph
)

__all__ = [
    '_sorted_edges',
    '_test_graph',
    'connected_components',
    'graph2disjoint_set',
    'kruskal_mst',
    'max_spacing_clustering'
]
