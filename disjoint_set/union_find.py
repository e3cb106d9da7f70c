import logging

from disjoint_set.common import ElementNotFoundError, Record, _test_element


logger = logging.getLogger(__name__)


class DisjointSet(object):
    """The union-find data structure with union by rank and path compression.

    The DisjointSet data structure is a collection of integer elements that
    supports the union and find operations (described below). Each element
    in the collection belongs to a set, which is identified by its
    representative (or root). Using the ``union(x, y)`` operation, the two
    sets that contain ``x`` and ``y`` can be fused together to form a new
    set. The ``find(x)`` operation identifies the representative of the set
    to which ``x`` belongs.

    Parameters
    ----------
    elements : iterable (optional)
        Integers to :meth:`.add` as singleton sets.

    Attributes
    ----------
    num_sets : int
        The number of disjoint sets contained in the data-structure.

    Examples
    --------
    >>> import disjoint_set as ds
    >>> uf = ds.DisjointSet(range(1, 11))
    >>> uf.union(3, 5)
    >>> uf.union(3, 6)
    >>> uf.find(5) == uf.find(6)
    True
    >>> uf.num_sets
    8
    """
    def __init__(self, elements=None):
        self._parent = {}
        self._rank = {}
        self._size = {}
        self.num_sets = 0

        if elements is not None:
            for element in elements:
                self.add(element)

    def __repr__(self):
        msg = "DisjointSet: contains {0} elements in {1} sets."
        return msg.format(len(self._parent), self.num_sets)

    def __contains__(self, element):
        try:
            self._check(element)
        except (ElementNotFoundError, TypeError):
            return False
        return True

    def __iter__(self):
        return iter(self._parent)

    def __len__(self):
        return len(self._parent)

    def _check(self, element):
        element = _test_element(element)
        if element not in self._parent:
            raise ElementNotFoundError(element)
        return element

    def add(self, element):
        """Adds ``element`` to the structure as a singleton set.

        An element that is already present is reset to a fresh singleton
        root with rank 0, and the rest of its old set stays together. If
        ``element`` was the representative of that set, another member
        takes over as its representative. That member inherits the old
        representative's rank, so its own rank can rise.

        Parameters
        ----------
        element : int
            The identifier of the new element.

        Raises
        ------
        TypeError
            If ``element`` is not an integer.
        """
        element = _test_element(element)

        if element in self._parent:
            logger.debug("Resetting element %d to a singleton set", element)
            self._detach(element)
        else:
            self.num_sets += 1

        self._parent[element] = element
        self._rank[element] = 0
        self._size[element] = 1

    def _detach(self, element):
        root = self.find(element)
        # Compressing every member leaves ``element`` either as the root
        # or as a leaf that nothing points at.
        members = [e for e in self._parent if self.find(e) == root]
        if len(members) == 1:
            return

        if root == element:
            new_root = next(e for e in members if e != element)
            for e in members:
                self._parent[e] = new_root
            self._rank[new_root] = self._rank[element]
            self._size[new_root] = self._size.pop(element) - 1
        else:
            self._size[root] -= 1
        self.num_sets += 1

    def find(self, element):
        """Locates the representative of the set to which ``element`` belongs.

        Every element on the path from ``element`` to the representative
        is re-pointed directly at the representative.

        Parameters
        ----------
        element : int
            An element that the ``DisjointSet`` contains.

        Returns
        -------
        int
            The representative of the set that contains ``element``.

        Raises
        ------
        ElementNotFoundError
            If ``element`` was never added.
        """
        element = self._check(element)

        path = []
        root = element
        while self._parent[root] != root:
            path.append(root)
            root = self._parent[root]

        for node in path:
            self._parent[node] = root

        return root

    def union(self, x, y):
        """Merges the set that contains ``x`` with the set that contains ``y``.

        The root with the larger rank becomes the root of the merged set.
        When the ranks are equal the root of ``x`` wins and its rank grows
        by one.

        Parameters
        ----------
        x, y : int
            Two elements whose sets are to be merged.

        Raises
        ------
        ElementNotFoundError
            If either ``x`` or ``y`` was never added.
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
        self._size[rx] += self._size.pop(ry)
        self.num_sets -= 1
        logger.debug("Attached root %d under root %d", ry, rx)

    def connected(self, x, y):
        """Returns whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def size(self, element):
        """Returns the number of elements in the set that ``element`` belongs to.

        Parameters
        ----------
        element : int
            An element that the ``DisjointSet`` contains.

        Returns
        -------
        out : int
            The number of elements in the set that ``element`` belongs to.
        """
        return self._size[self.find(element)]

    def rank(self, element):
        """Returns the rank of ``element`` without compressing any paths."""
        return self._rank[self._check(element)]

    def parent(self, element):
        """Returns the parent of ``element`` without compressing any paths."""
        return self._parent[self._check(element)]

    def sets(self):
        """Returns the partition held by the structure.

        Returns
        -------
        list
            A list of :class:`sets<set>`, one for each representative,
            ordered by the earliest added member of each set.
        """
        groups = {}
        for element in self._parent:
            groups.setdefault(self.find(element), set()).add(element)
        return list(groups.values())

    def records(self):
        """Returns a snapshot of every element's rank and parent.

        This is an inspection view: it does not compress any paths and
        changing the returned dict does not affect the structure.

        Returns
        -------
        dict
            Maps each element to its :class:`.Record`.

        Examples
        --------
        >>> import disjoint_set as ds
        >>> uf = ds.DisjointSet([1, 2])
        >>> uf.union(1, 2)
        >>> uf.records()
        {1: Record(rank=1, parent=1), 2: Record(rank=0, parent=1)}
        """
        return {e: Record(self._rank[e], p) for e, p in self._parent.items()}
