import pytest

from ftkit.linkedlist import LinkedList, Node


def _three():
    return LinkedList(["First Node.", "Second Node.", "Third Node."])


def test_append_keeps_order():
    lst = LinkedList()
    lst.append("First Node.")
    lst.append("Second Node.")
    lst.append("Third Node.")
    assert list(lst) == ["First Node.", "Second Node.", "Third Node."]
    assert len(lst) == 3


def test_prepend_puts_item_in_front():
    lst = LinkedList(["Hello World"])
    lst.prepend("Hello im in front")
    assert list(lst) == ["Hello im in front", "Hello World"]
    assert lst.first().content == "Hello im in front"
    assert lst.first().prev is None


def test_prepend_on_empty_sets_both_ends():
    lst = LinkedList()
    node = lst.prepend("only")
    assert lst.first() is node
    assert lst.last() is node
    assert node.prev is None and node.next is None


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.first() is None
    assert lst.last() is None
    assert list(lst) == []


def test_last_node_content():
    lst = LinkedList(["Hello World.", "Testing", "Nothing meaningful over here."])
    assert lst.last().content == "Nothing meaningful over here."
    assert lst.last().next is None


def test_links_are_consistent_both_ways():
    lst = LinkedList(range(5))
    nodes = list(lst.nodes())
    for a, b in zip(nodes, nodes[1:]):
        assert a.next is b
        assert b.prev is a
    assert nodes[0].prev is None
    assert nodes[-1].next is None


def test_node_first_and_last_from_middle():
    lst = _three()
    middle = lst.first().next
    assert middle.content == "Second Node."
    assert middle.first() is lst.first()
    assert middle.last() is lst.last()


def test_lone_node_is_its_own_ends():
    node = Node("alone")
    assert node.first() is node
    assert node.last() is node


def test_clear_calls_delete_in_order_and_empties():
    lst = _three()
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["First Node.", "Second Node.", "Third Node."]
    assert len(lst) == 0
    assert lst.first() is None
    assert list(lst) == []


def test_clear_without_delete():
    lst = _three()
    lst.clear()
    assert len(lst) == 0
    assert lst.last() is None


def test_for_each_visits_every_content():
    lst = _three()
    seen = []
    lst.for_each(seen.append)
    assert seen == list(lst)


def test_map_builds_new_list_and_leaves_original():
    lst = _three()
    mapped = lst.map(str.upper)
    assert list(mapped) == [s.upper() for s in lst]
    assert list(lst) == ["First Node.", "Second Node.", "Third Node."]
    assert mapped.first() is not lst.first()
    assert mapped.last().prev is mapped.first().next


def test_map_replacing_contents():
    lst = _three()
    mapped = lst.map(lambda _: "This is modified")
    assert list(mapped) == ["This is modified"] * 3


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_partial_results():
    lst = LinkedList([1, 2, 0, 4])
    deleted = []
    with pytest.raises(ZeroDivisionError):
        lst.map(lambda x: 12 // x, deleted.append)
    assert deleted == [12, 6]


def test_copy_is_independent():
    lst = LinkedList([[1], [2]])
    dup = lst.copy()
    assert list(dup) == list(lst)
    dup.first().content.append(9)
    assert list(lst) == [[1], [2]]
    dup.append([3])
    assert len(lst) == 2
    assert len(dup) == 3


def test_nodes_iteration_survives_unlinking():
    lst = _three()
    contents = [node.content for node in lst.nodes()]
    assert contents == list(lst)