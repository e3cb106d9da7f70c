import logging
import numbers

import numpy as np

from disjoint_set.common import ElementNotFoundError, Record, _test_element


logger = logging.getLogger(__name__)


class ArrayDisjointSet(object):
    """A union-find data structure over the elements ``0, 1, ..., n - 1``.

    Behaves like :class:`.DisjointSet`, except that every element exists
    from the start and the ranks, parents and set sizes are kept in
    :class:`numpy.ndarray` objects indexed by element.

    Parameters
    ----------
    n : int
        The number of elements.

    Attributes
    ----------
    num_sets : int
        The number of disjoint sets contained in the data-structure.

    Raises
    ------
    TypeError
        If ``n`` is not an integer.
    ValueError
        If ``n`` is negative.
    """
    def __init__(self, n):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError("n must be an integer.")
        if n < 0:
            raise ValueError("n must be non-negative.")

        self._parent = np.arange(n, dtype=np.intp)
        self._rank = np.zeros(n, dtype=np.intp)
        self._size = np.ones(n, dtype=np.intp)
        self.num_sets = int(n)

    def __repr__(self):
        msg = "ArrayDisjointSet: contains {0} elements in {1} sets."
        return msg.format(len(self), self.num_sets)

    def __contains__(self, element):
        try:
            self._check(element)
        except (ElementNotFoundError, TypeError):
            return False
        return True

    def __iter__(self):
        return iter(range(len(self)))

    def __len__(self):
        return self._parent.shape[0]

    def _check(self, element):
        element = _test_element(element)
        if not 0 <= element < len(self):
            raise ElementNotFoundError(element)
        return element

    def add(self, element):
        """Resets ``element`` to a singleton set with rank 0.

        The rest of the element's old set stays together; if ``element``
        was its representative another member takes over and
        inherits its rank, so the new representative's rank can rise.

        Raises
        ------
        ElementNotFoundError
            If ``element`` is not in ``range(n)``.
        """
        element = self._check(element)
        roots = self.roots()
        members = np.flatnonzero(roots == roots[element])

        if members.shape[0] > 1:
            logger.debug("Resetting element %d to a singleton set", element)
            root = roots[element]
            if root == element:
                new_root = members[members != element][0]
                self._parent[members] = new_root
                self._rank[new_root] = self._rank[element]
                self._size[new_root] = self._size[element] - 1
            else:
                self._size[root] -= 1
            self.num_sets += 1

        self._parent[element] = element
        self._rank[element] = 0
        self._size[element] = 1

    def find(self, element):
        """Locates the representative of the set that contains ``element``.

        Parameters
        ----------
        element : int
            An integer in ``range(n)``.

        Returns
        -------
        int
            The representative of the set that contains ``element``.

        Raises
        ------
        ElementNotFoundError
            If ``element`` is not in ``range(n)``.
        """
        element = self._check(element)
        parent = self._parent

        path = []
        root = element
        while parent[root] != root:
            path.append(root)
            root = parent[root]

        if path:
            parent[path] = root

        return int(root)

    def union(self, x, y):
        """Merges the set that contains ``x`` with the set that contains ``y``.

        Follows the same rules as :meth:`.DisjointSet.union`.
        """
        x, y = self._check(x), self._check(y)
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return

        if self._rank[rx] < self._rank[ry]:
            rx, ry = ry, rx
        elif self._rank[rx] == self._rank[ry]:
            self._rank[rx] += 1

        self._parent[ry] = rx
        self._size[rx] += self._size[ry]
        self.num_sets -= 1

    def connected(self, x, y):
        """Returns whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def size(self, element):
        """Returns the number of elements in the set containing ``element``."""
        return int(self._size[self.find(element)])

    def rank(self, element):
        return int(self._rank[self._check(element)])

    def parent(self, element):
        return int(self._parent[self._check(element)])

    def roots(self):
        """Returns the representative of every element.

        Every path in the structure is fully compressed afterwards.

        Returns
        -------
        :class:`~numpy.ndarray`
            An array where ``roots[e]`` is the representative of ``e``.
        """
        parent = self._parent
        grand = parent[parent]
        while not np.array_equal(grand, parent):
            parent[:] = grand
            grand = parent[parent]
        return parent.copy()

    def sets(self):
        """Returns a list of sets, one per representative, ordered by
        their smallest member.
        """
        roots = self.roots()
        groups = {}
        for element, root in enumerate(roots.tolist()):
            groups.setdefault(root, set()).add(element)
        return list(groups.values())

    def records(self):
        """Returns a dict mapping each element to its :class:`.Record`.

        No paths are compressed.
        """
        return {
            e: Record(int(r), int(p))
            for e, (r, p) in enumerate(zip(self._rank, self._parent))
        }
