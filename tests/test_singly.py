import pytest

from drills.singly import (
    Node,
    cycle_length,
    cycle_start,
    cycle_start_visited,
    delete_last,
    find,
    from_values,
    has_cycle,
    has_cycle_visited,
    length,
    middle,
    push_front,
    reverse,
    reverse_recursive,
    segregate_even_odd,
    to_list,
)


def _looped(count, back_to):
    """Nodes 1..count with the last linked back to node number ``back_to``."""
    nodes = [Node(i) for i in range(1, count + 1)]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
    nodes[-1].next = nodes[back_to - 1]
    return nodes


def test_round_trip():
    values = [1, 2, 3, 4, 5, 6, 10]
    assert to_list(from_values(values)) == values


def test_empty_list():
    assert from_values([]) is None
    assert to_list(None) == []
    assert length(None) == 0


def test_length():
    values = [1, 2, 3, 4, 5, 6, 10]
    assert length(from_values(values)) == len(values)


def test_find_present_and_absent():
    head = from_values([1, 2, 3, 4, 5, 6, 10])
    found = find(head, 10)
    assert found.data == 10
    assert found.next is None
    assert find(head, 99) is None


def test_push_front():
    values = [12, 8, 5, 7]
    head = push_front(from_values(values), 100)
    assert to_list(head) == [100] + values


def test_delete_last():
    head = delete_last(from_values([4, 3, 2, 1]))
    assert to_list(head) == [4, 3, 2]


def test_delete_last_single_and_empty():
    assert delete_last(Node(7)) is None
    assert delete_last(None) is None


def test_to_list_rejects_cycle():
    nodes = _looped(5, 3)
    with pytest.raises(ValueError):
        to_list(nodes[0])


@pytest.mark.parametrize("check", [has_cycle, has_cycle_visited])
def test_cycle_detection(check):
    assert check(_looped(5, 3)[0]) is True
    assert check(from_values([1, 2, 3, 4, 5])) is False
    assert check(None) is False


@pytest.mark.parametrize("back_to", [1, 2, 3, 5])
def test_cycle_length(back_to):
    nodes = _looped(5, back_to)
    assert cycle_length(nodes[0]) == len(nodes) - back_to + 1


def test_cycle_length_without_loop():
    assert cycle_length(from_values([1, 2, 3])) == 0
    assert cycle_length(None) == 0


@pytest.mark.parametrize("find_start", [cycle_start, cycle_start_visited])
@pytest.mark.parametrize("back_to", [1, 2, 4, 5])
def test_cycle_start(find_start, back_to):
    nodes = _looped(5, back_to)
    assert find_start(nodes[0]) is nodes[back_to - 1]


@pytest.mark.parametrize("find_start", [cycle_start, cycle_start_visited])
def test_cycle_start_without_loop(find_start):
    assert find_start(from_values([1, 2])) is None
    assert find_start(None) is None


@pytest.mark.parametrize(
    "values", [[1, 2, 3, 4, 5, 6, 10, 20], [1, 2, 3, 4, 5], [7], [1, 2]]
)
def test_middle(values):
    assert middle(from_values(values)).data == values[len(values) // 2]


def test_middle_empty():
    assert middle(None) is None


@pytest.mark.parametrize("turn", [reverse, reverse_recursive])
@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5, 6, 10], [9], []])
def test_reverse(turn, values):
    assert to_list(turn(from_values(values))) == values[::-1]


@pytest.mark.parametrize("turn", [reverse, reverse_recursive])
def test_reverse_twice_restores(turn):
    values = [1, 2, 3, 4, 5, 6, 10]
    assert to_list(turn(turn(from_values(values)))) == values


def test_segregate_even_odd():
    assert to_list(segregate_even_odd(from_values([1, 2, 3, 4, 5, 6]))) == [
        2, 4, 6, 1, 3, 5,
    ]


def test_segregate_keeps_every_node_once():
    values = [5, 8, 1, 0, 7, 2, 9]
    result = to_list(segregate_even_odd(from_values(values)))
    assert sorted(result) == sorted(values)
    parities = [v & 1 for v in result]
    assert parities == sorted(parities)


def test_segregate_empty():
    assert segregate_even_odd(None) is None