"""
Union-find over the integers 0..size-1, used by Kruskal's spanning tree.
"""

from __future__ import annotations

from typing import List


class DisjointSet:
    """
    Disjoint-set forest with path compression and union by rank.

    Attributes:
        parents: Parent index of every element (roots point to themselves)
        ranks: Upper bound on each root's tree height
    """

    def __init__(self, size: int):
        self.parents: List[int] = list(range(size))
        self.ranks: List[int] = [0] * size

    def __len__(self) -> int:
        return len(self.parents)

    def find(self, i: int) -> int:
        """
        Return the representative of the set containing `i`.

        Every element visited on the way is re-pointed directly at the root.
        """
        root = i
        while self.parents[root] != root:
            root = self.parents[root]
        while self.parents[i] != root:
            self.parents[i], i = root, self.parents[i]
        return root

    def merge_sets(self, i: int, j: int) -> bool:
        """
        Merge the sets containing `i` and `j`.

        The root with the higher rank absorbs the other; on equal ranks the
        root of `i` absorbs the root of `j` and its rank grows by one.

        Returns:
            False (and nothing changes) if `i` and `j` were already in the
            same set, True otherwise.
        """
        repr0 = self.find(i)
        repr1 = self.find(j)
        if repr0 == repr1:
            return False
        cmp = self.ranks[repr0] - self.ranks[repr1]
        if cmp >= 0:
            if cmp == 0:
                self.ranks[repr0] += 1
            self.parents[repr1] = repr0
        else:
            self.parents[repr0] = repr1
        return True

    def same_set(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)
