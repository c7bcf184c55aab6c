"""
Priority queue of tree nodes, lowest frequency first
"""


class PriorityQueue:
    """
    Ordered list of nodes in ascending order of frequency.

    A new node goes in front of every node with the same or a bigger
    frequency, so among equal frequencies the latest node comes first.
    """

    def __init__(self, nodes=None):
        self.queue = []
        for node in nodes or ():
            self.enqueue(node)

    def enqueue(self, node):
        """
        Inserts node before the first node whose frequency is
        greater than or equal to node's frequency.

        :param node: Leaf or Branch to add
        """
        for i, resident in enumerate(self.queue):
            if resident.freq >= node.freq:
                self.queue.insert(i, node)
                return
        self.queue.append(node)

    def dequeue(self):
        """
        Removes the node with the lowest frequency.

        :return: the first node in the queue, None if the queue is empty
        """
        return self.queue.pop(0) if self.queue else None

    def size(self) -> int:
        return len(self.queue)

    def __len__(self):
        return len(self.queue)

    def __iter__(self):
        return iter(self.queue)
