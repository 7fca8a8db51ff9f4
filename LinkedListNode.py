
class SinglyLinkedListNode:
    """
    A node in a singly-linked list structure.

    Attributes:
        value: The data stored in this node.
        nextNode (SinglyLinkedListNode): Reference to the next node in the list, or None at the end.
    """
    def __init__(self,value):
        self.value = value

        self.nextNode = None


class DoublyLinkedListNode:
    """
    Storage unit of a DoublyLinkedList.

    The list owns nodes through the nextNode chain. prevNode is only a
    back-reference so the list can walk from its tail and relink neighbours
    on removal; it is None for the head node.

    Attributes:
        value: The stored element.
        nextNode (DoublyLinkedListNode): Successor, or None for the tail node.
        prevNode (DoublyLinkedListNode): Predecessor, or None for the head node.
    """
    def __init__(self,value,prevNode=None):
        self.value = value

        self.nextNode = None
        self.prevNode = prevNode
