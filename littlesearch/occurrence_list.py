from typing import Optional, Sequence


class Occurrence(object):
    __slots__ = ('doc', 'frequency')

    def __init__(self, doc: str, frequency: int = 1):
        self.doc = doc
        self.frequency = frequency

    def __eq__(self, other):
        if not isinstance(other, Occurrence):
            return NotImplemented
        return self.doc == other.doc and self.frequency == other.frequency

    def __repr__(self):
        return f"({self.doc},{self.frequency})"


def insert_sorted(occs: list[Occurrence]) -> Optional[list[int]]:
    """
    Move the last occurrence of occs to its place in descending frequency order.

    occs[:-1] must already be sorted by descending frequency. The new
    occurrence goes after every occurrence with the same or a higher
    frequency, so occurrences of equal frequency keep their merge order.

    Parameters
    ----------
    occs: list[Occurrence]
        a sorted list followed by one pending occurrence

    Returns
    -------
    list[int] or None
        the mid point indexes probed by the binary search, or None if occs
        has a single occurrence
    """
    if len(occs) <= 1:
        return None

    target = occs[-1].frequency
    probes = []
    left = 0
    right = len(occs) - 1
    while left < right:
        m = (left + right) // 2
        probes.append(m)
        if occs[m].frequency >= target:
            left = m + 1
        else:
            right = m

    if left < len(occs) - 1:
        occs.insert(left, occs.pop())
    return probes


def top_n_or(a: Sequence[Occurrence], b: Sequence[Occurrence], n: int) -> list[str]:
    """Merge two descending occurrence lists into at most n distinct docs."""
    result = []
    seen = set()
    i = 0
    j = 0
    while len(result) < n and (i < len(a) or j < len(b)):
        if j >= len(b) or (i < len(a) and a[i].frequency >= b[j].frequency):
            doc = a[i].doc
            i += 1
        else:
            doc = b[j].doc
            j += 1
        if doc not in seen:
            seen.add(doc)
            result.append(doc)
    return result
