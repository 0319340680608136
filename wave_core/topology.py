"""
Topology of the wave background: a minimum spanning tree plus extra edges.

The "ideal" edge set is recomputed from scratch every frame. Edge weights
favor short distances and big nodes, so large nodes act as local hubs.
Pairs are handled as index tuples into the node list; the engine turns them
into `Edge` records.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Set, Tuple

from .disjoint_set import DisjointSet
from .graph import Node

WeightedPair = Tuple[float, int, int]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def ideal_edge_count(num_nodes: int, extra_edge_proportion: float) -> int:
    """
    Number of edges the topology aims for with `num_nodes` nodes.

    A spanning tree has n - 1 edges; the extra proportion adds that fraction
    of additional edges on top. Never negative.
    """
    return max(0, round_half_up((num_nodes - 1) * (1 + extra_edge_proportion)))


def edge_weight(a: Node, b: Node, radii_weight_power: float) -> float:
    """Distance between two nodes, scaled down by (r_a * r_b) ** power."""
    weight = math.hypot(a.x - b.x, a.y - b.y)
    return weight / math.pow(a.radius * b.radius, radii_weight_power)


def all_edge_weights(nodes: Sequence[Node], radii_weight_power: float) -> List[WeightedPair]:
    """
    Weigh every unordered pair of nodes.

    Returns:
        List of (weight, i, j) with i > j, sorted by ascending weight. The sort
        is stable, so equal weights keep their generation order.
    """
    result: List[WeightedPair] = []
    for i in range(len(nodes)):
        a = nodes[i]
        for j in range(i):
            result.append((edge_weight(a, nodes[j], radii_weight_power), i, j))
    result.sort(key=lambda item: item[0])
    return result


def spanning_tree(num_nodes: int, weighted: Sequence[WeightedPair]) -> List[Tuple[int, int]]:
    """
    Kruskal's algorithm over pre-sorted weighted pairs.

    Args:
        num_nodes: Number of nodes the pair indices refer to
        weighted: Pairs sorted by ascending weight (see `all_edge_weights`)

    Returns:
        The tree's (i, j) pairs, in the order they were accepted
    """
    result: List[Tuple[int, int]] = []
    if num_nodes < 2:
        return result
    ds = DisjointSet(num_nodes)
    for _, i, j in weighted:
        if ds.merge_sets(i, j):
            result.append((i, j))
            if len(result) >= num_nodes - 1:
                break
    return result


def ideal_edges(
    nodes: Sequence[Node],
    radii_weight_power: float,
    extra_edge_proportion: float,
) -> List[Tuple[int, int]]:
    """
    Compute this frame's ideal edge set.

    Spanning tree edges come first, followed by the cheapest remaining pairs
    until `ideal_edge_count` is reached. No pair appears twice in either
    order.
    """
    weighted = all_edge_weights(nodes, radii_weight_power)
    target = ideal_edge_count(len(nodes), extra_edge_proportion)
    result = spanning_tree(len(nodes), weighted)
    seen: Set[frozenset] = {frozenset(pair) for pair in result}
    for _, i, j in weighted:
        if len(result) >= target:
            break
        key = frozenset((i, j))
        if key not in seen:
            seen.add(key)
            result.append((i, j))
    return result
