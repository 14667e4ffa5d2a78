from random import randrange

import pytest

from .occurrence_list import Occurrence, insert_sorted, top_n_or


def frequencies(occs):
    return [o.frequency for o in occs]


def test_occurrence_repr():
    assert repr(Occurrence('doc1', 3)) == '(doc1,3)'


def test_insert_sorted_single():
    occs = [Occurrence('d1', 4)]
    assert insert_sorted(occs) is None
    assert occs == [Occurrence('d1', 4)]


def test_insert_sorted_merge_order():
    occs = [Occurrence('doc1', 2)]
    occs.append(Occurrence('doc2', 9))
    assert insert_sorted(occs) == [0]
    occs.append(Occurrence('doc3', 5))
    assert insert_sorted(occs) == [1, 0]
    assert occs == [Occurrence('doc2', 9), Occurrence('doc3', 5), Occurrence('doc1', 2)]


def test_insert_sorted_last():
    occs = [Occurrence('a', 9), Occurrence('b', 7), Occurrence('c', 3), Occurrence('d', 1)]
    assert insert_sorted(occs) == [1, 2]
    assert frequencies(occs) == [9, 7, 3, 1]
    assert occs[-1].doc == 'd'


def test_insert_sorted_first():
    occs = [Occurrence('a', 5), Occurrence('b', 4), Occurrence('c', 3), Occurrence('d', 8)]
    assert insert_sorted(occs) == [1, 0]
    assert [o.doc for o in occs] == ['d', 'a', 'b', 'c']


def test_insert_sorted_tie():
    occs = [Occurrence('a', 5), Occurrence('b', 3), Occurrence('c', 3), Occurrence('d', 1),
            Occurrence('e', 3)]
    insert_sorted(occs)
    assert [o.doc for o in occs] == ['a', 'b', 'c', 'e', 'd']


def insert_sorted_test_cases(num, max_len):
    tests = []
    for _ in range(num):
        n = randrange(1, max_len)
        tests.append([randrange(1, 6) for _ in range(n)])
    return tests


@pytest.mark.parametrize('freqs', insert_sorted_test_cases(100, 20))
def test_insert_sorted_random(freqs):
    merged = [Occurrence(f'd{i}', f) for i, f in enumerate(freqs)]
    occs = []
    for occurrence in merged:
        occs.append(occurrence)
        probes = insert_sorted(occs)
        if len(occs) == 1:
            assert probes is None
        else:
            assert all(0 <= p < len(occs) - 1 for p in probes)
            assert len(probes) <= (len(occs) - 1).bit_length()
    # a stable sort keeps merge order among equal frequencies
    assert occs == sorted(merged, key=lambda o: -o.frequency)


def descending(docs, max_freq):
    return sorted([Occurrence(doc, randrange(1, max_freq)) for doc in docs],
                  key=lambda o: -o.frequency)


def linear_top_n(a, b, n):
    result = []
    for o in sorted(list(a) + list(b), key=lambda o: -o.frequency):
        if o.doc not in result:
            result.append(o.doc)
    return result[:n]


def top_n_test_cases(num, max_len):
    tests = []
    for _ in range(num):
        pool = [f'd{i}' for i in range(max_len)]
        a = descending({pool[randrange(max_len)] for _ in range(randrange(max_len))}, 8)
        b = descending({pool[randrange(max_len)] for _ in range(randrange(max_len))}, 8)
        tests.append((a, b))
    return tests


@pytest.mark.parametrize('a, b', top_n_test_cases(100, 10))
def test_top_n_or_random(a, b):
    result = top_n_or(a, b, 5)
    assert result == linear_top_n(a, b, 5)
    assert len(result) == len(set(result)) <= 5
    docs = {o.doc for o in a} | {o.doc for o in b}
    assert set(result) <= docs


def test_top_n_or_dedup():
    apple = [Occurrence('d1', 5), Occurrence('d2', 3)]
    banana = [Occurrence('d2', 7)]
    assert top_n_or(apple, banana, 5) == ['d2', 'd1']


def test_top_n_or_tie_prefers_first():
    a = [Occurrence('x', 4)]
    b = [Occurrence('y', 4)]
    assert top_n_or(a, b, 5) == ['x', 'y']
    assert top_n_or(b, a, 5) == ['y', 'x']


def test_top_n_or_limit():
    a = [Occurrence(f'a{i}', 10 - i) for i in range(4)]
    b = [Occurrence(f'b{i}', 10 - i) for i in range(4)]
    assert top_n_or(a, b, 5) == ['a0', 'b0', 'a1', 'b1', 'a2']


def test_top_n_or_empty():
    assert top_n_or([], [], 5) == []
    assert top_n_or([], [Occurrence('d', 1)], 5) == ['d']
