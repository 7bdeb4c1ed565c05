from itertools import islice

from storomata.agenda import LimitedHeap
from storomata.search import Search


def tree(n):
    return [2 * n, 2 * n + 1] if n < 4 else []


def test_dfs_visits_every_node_depth_first():
    result = list(Search.dfs([1], tree))
    assert result == [1, 3, 7, 6, 2, 5, 4]


def test_bfs_visits_in_level_order():
    result = list(Search.bfs([1], tree))
    assert result == sorted(result)
    assert set(result) == set(range(1, 8))


def test_weighted_search_with_negated_weight_is_ascending():
    result = list(Search.weighted([1], tree, lambda n: -n))
    assert result == sorted(result)
    assert len(result) == 7


def test_weighted_search_default_prefers_greatest():
    search = Search.weighted([1], tree)
    assert next(search) == 1
    assert next(search) == 3


def test_search_is_lazy_on_infinite_graph():
    search = Search.dfs([0], lambda n: [n + 1])
    assert list(islice(search, 5)) == list(range(5))


def test_search_with_no_initials_is_empty():
    assert list(Search.bfs([], tree)) == []


def test_search_with_custom_agenda():
    agenda = LimitedHeap(1)
    agenda.extend([3, 8, 5])
    search = Search(agenda, lambda n: [n - 1] if n > 6 else [])
    assert list(search) == [8, 7, 6]


def test_uniques_on_cycle():
    cycle = lambda n: [(n + 1) % 3]
    assert list(islice(Search.dfs([0], cycle), 6)) == [0, 1, 2, 0, 1, 2]
    assert list(Search.dfs([0], cycle).uniques()) == list(range(3))