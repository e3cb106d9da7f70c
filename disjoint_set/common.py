import collections
import numbers


Record = collections.namedtuple(
    typename='Record',
    field_names=['rank', 'parent']
)


class DisjointSetError(Exception):
    """Base class for exceptions in disjoint_set."""
    pass


class ElementNotFoundError(DisjointSetError, KeyError):
    """Raised when an operation names an element that was never added."""

    def __init__(self, element):
        self.element = element
        super(ElementNotFoundError, self).__init__(element)

    def __str__(self):
        return "Element {0!r} is not in the disjoint set.".format(self.element)


def _test_element(element):
    """Makes sure ``element`` is an integer identifier.

    Raises
    ------
    TypeError
        If ``element`` is not an integer (booleans are rejected too).
    """
    if isinstance(element, bool) or not isinstance(element, numbers.Integral):
        msg = "Elements must be integers, not {0}."
        raise TypeError(msg.format(type(element).__name__))
    return int(element)
