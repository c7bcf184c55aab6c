from algorithms.huffman_utils.node import Branch, Leaf
from algorithms.huffman_utils.priority_queue import PriorityQueue


def freqs(queue):
    return [node.freq for node in queue]


def test_enqueue_keeps_ascending_order():
    queue = PriorityQueue()
    for freq in (5, 1, 4, 2, 3, 9, 0):
        queue.enqueue(Leaf(str(freq), freq))

    assert freqs(queue) == [0, 1, 2, 3, 4, 5, 9]
    assert queue.size() == 7
    assert len(queue) == 7


def test_later_equal_frequency_goes_first():
    first = Leaf("a", 1)
    second = Leaf("b", 1)
    third = Leaf("c", 1)
    queue = PriorityQueue([first, Leaf("x", 2), second, third])

    assert list(queue)[:3] == [third, second, first]


def test_branch_goes_before_equal_leaf():
    leaf = Leaf("c", 4)
    branch = Branch(4, Leaf("a", 2), Leaf("b", 2))
    queue = PriorityQueue([leaf])
    queue.enqueue(branch)

    assert queue.dequeue() is branch
    assert queue.dequeue() is leaf


def test_dequeue_empty_returns_none():
    queue = PriorityQueue()
    assert queue.dequeue() is None
    assert queue.size() == 0


def test_dequeue_removes_lowest():
    queue = PriorityQueue([Leaf("a", 3), Leaf("b", 1), Leaf("c", 2)])

    assert [queue.dequeue().symbol for _ in range(3)] == ["b", "c", "a"]
    assert queue.dequeue() is None
