import pytest

from oitools.graph import Graph


def make_chain():
    g = Graph()
    g.connect(1, 2)
    g.connect(2, 3, 5)
    return g


def test_add_node_counts_components():
    g = Graph()
    g.add_node("a")
    g.add_node("b")
    g.add_node("a")
    assert len(g) == 2
    assert g.components == len(g)


def test_connect_merges_components():
    g = Graph()
    g.add_node(1)
    g.add_node(2)
    before = g.components
    g.connect(1, 2)
    assert g.components == before - 1


def test_connect_within_component_keeps_count():
    g = make_chain()
    before = g.components
    g.connect(3, 1)
    assert g.components == before


def test_edges_record_weights():
    g = make_chain()
    assert g.edges == {(1, 2): 0, (2, 3): 5}


def test_reachability_follows_direction():
    g = make_chain()
    assert g.is_reachable(1, 3) is True
    assert g.is_reachable(3, 1) is False
    assert g.is_weakly_connected(3, 1) is True


def test_self_reachable_and_missing_nodes():
    g = make_chain()
    assert g.is_reachable(2, 2) is True
    assert g.is_reachable(1, 99) is False
    assert 99 not in g


def test_remove_edge_splits_component():
    g = make_chain()
    before = g.components
    g.remove_edge(2, 3)
    assert g.components == before + 1
    assert g.is_weakly_connected(1, 3) is False


def test_remove_edge_with_alternate_path_keeps_count():
    g = make_chain()
    g.connect(1, 3)
    before = g.components
    g.remove_edge(1, 3)
    assert g.components == before
    assert g.is_reachable(1, 3) is True


def test_remove_missing_edge_raises():
    g = make_chain()
    with pytest.raises(KeyError):
        g.remove_edge(3, 2)


def test_remove_node_drops_edges_and_splits():
    g = make_chain()
    g.remove_node(2)
    assert 2 not in g
    assert g.edges == {}
    assert g.components == len(g)


def test_remove_node_with_self_loop():
    g = Graph()
    g.connect("x", "x")
    g.connect("x", "y")
    g.remove_node("x")
    assert "x" not in g
    assert g.components == len(g)


def test_remove_missing_node_is_ignored():
    g = make_chain()
    before = (g.components, len(g))
    g.remove_node(42)
    assert (g.components, len(g)) == before


def test_reweight_existing_edge():
    g = make_chain()
    g.connect(1, 2, 9)
    assert g.edges[(1, 2)] == 9
    assert len(g.edges) == 2