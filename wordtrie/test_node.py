import pytest

from wordtrie import Node, NodeMap


def test_new_node():
    n = Node("a")
    assert n.value == "a"
    assert n.is_end is False
    assert n.word == ""
    assert len(n.children) == 0

    assert Node().value == ""


def test_nodemap_add_contains_get():
    m = NodeMap()
    a = Node("a")
    m.add("a", a)

    assert m.contains("a") is True
    assert "a" in m
    assert m.contains("b") is False
    assert m.get("a") is a

    # add overwrites
    other = Node("a")
    m.add("a", other)
    assert m.get("a") is other
    assert len(m) == 1


def test_nodemap_get_missing_key_is_an_assertion():
    m = NodeMap()
    with pytest.raises(AssertionError, match="node not in the nodemap"):
        m.get("x")


def test_nodemap_remove():
    m = NodeMap()
    m.add("a", Node("a"))
    m.add("b", Node("b"))

    m.remove("a")
    assert not m.contains("a")
    assert list(m) == ["b"]

    # removing a missing key is a no-op
    m.remove("a")
    assert len(m) == 1


def test_nodemap_items_keep_insertion_order():
    m = NodeMap()
    for ch in "cab":
        m.add(ch, Node(ch))

    assert [k for k, _ in m.items()] == ["c", "a", "b"]
    assert [n.value for _, n in m.items()] == ["c", "a", "b"]


def test_node_repr():
    n = Node("t")
    assert repr(n) == "Node(value='t', children=0)"

    n.is_end = True
    n.word = "cat"
    assert repr(n) == "Node(value='t' word='cat', children=0)"
