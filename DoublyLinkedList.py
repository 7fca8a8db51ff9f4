from LinkedListNode import DoublyLinkedListNode
from LinkedListLogger import BuildLogger

import logging
import numpy as np


class DoublyLinkedList:
    """
    A doubly-linked list implementation with bidirectional traversal support.

    Both the head and tail nodes are tracked, so insertion at either end is
    O(1). Each node's previous node reference always points at the node whose
    next node reference points back to it.

    Attributes:
        numNodes (int): Number of elements in the list.
        headNode (DoublyLinkedListNode): First node in the list.
        tailNode (DoublyLinkedListNode): Last node in the list.
        reverseIteration (bool): Whether iteration should be in reverse order.
        logger (logging.Logger): Logger for debugging output.
    """
    def __init__(self,arr=[],reverseIteration=False,logFile=None,logLevel=logging.WARNING,logger: logging.Logger = None):
        """
        Initialize a new doubly linked list.

        Args:
            arr (iterable, optional): Initial elements to populate the list. Defaults to [].
            reverseIteration (bool, optional): Whether to iterate in reverse order. Defaults to False.
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        self.logger = BuildLogger("DOUBLY_LINKED_LIST",logFile,logLevel,logger)
        self.numNodes = 0
        self.headNode = None
        self.tailNode = None
        self.reverseIteration = reverseIteration

        for e in arr:
            self.add(e)

    def add(self,value):
        """
        Add a new element to the end of the list.

        Args:
            value: The value to append to the list.
        """
        newNode = DoublyLinkedListNode(value,self.tailNode)

        if self.headNode is None:
            self.headNode = newNode
            self.tailNode = newNode
        else:
            self.tailNode.nextNode = newNode
            self.tailNode = newNode

        self.numNodes += 1
        self.logger.debug("Appended %s. The list now holds %s values.", value, self.numNodes)

    def prepend(self,value):
        """
        Insert a value in front of the current head node in O(1).

        On an empty list this is equivalent to add().

        Args:
            value: The value that becomes the new first element.
        """
        if self.headNode is None:
            self.add(value)
            return

        oldHead = self.headNode
        self.headNode = DoublyLinkedListNode(value)
        self.headNode.nextNode = oldHead
        oldHead.prevNode = self.headNode

        self.numNodes += 1
        self.logger.debug("Prepended %s. The list now holds %s values.", value, self.numNodes)

    def remove(self,value):
        """
        Remove the first node (from head to tail) whose value equals the given value.

        The successor's previous node reference and the head/tail references are
        repaired as needed. Nothing happens if no node holds the value.

        Args:
            value: The value to remove.

        Returns:
            bool: True if a node was removed, False otherwise.
        """
        nodei = self.headNode
        while nodei is not None:
            if nodei.value == value:
                break
            nodei = nodei.nextNode
        else:
            self.logger.debug("Ignoring removal of %s: value not found.", value)
            return False

        if nodei.nextNode is not None:
            nodei.nextNode.prevNode = nodei.prevNode
        if nodei.prevNode is not None:
            nodei.prevNode.nextNode = nodei.nextNode

        if self.headNode is nodei:
            self.headNode = nodei.nextNode
        if self.tailNode is nodei:
            self.tailNode = nodei.prevNode

        nodei.nextNode = None
        nodei.prevNode = None

        self.numNodes -= 1
        self.logger.debug("Removed %s. The list now holds %s values.", value, self.numNodes)
        return True

    def contains(self,value):
        for e in self.traverseForward():
            if e == value:
                return True
        return False

    def size(self):
        return self.numNodes

    def isEmpty(self):
        return self.headNode is None

    def traverseForward(self):
        """
        Iterate over the stored values from head to tail.

        Returns:
            generator: The list values in forward order.
        """
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def traverseBackward(self):
        """
        Iterate over the stored values from tail to head by following the previous node references.

        Returns:
            generator: The list values in reverse order.
        """
        nodei = self.tailNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.prevNode

    def render(self,reverse=False):
        """
        Build the display string for this list, e.g. "1 <-> 2 <-> 3 <-> null".

        Args:
            reverse (bool, optional): Render from tail to head instead. Defaults to False.

        Returns:
            str: The values joined by "<->" and terminated by "null".
        """
        values = self.traverseBackward() if reverse else self.traverseForward()
        return " <-> ".join([str(e) for e in values] + ["null"])

    def printList(self):
        print(self.render())

    def printReverse(self):
        print(self.render(reverse=True))

    def toArray(self,dtype=None,reverse=False):
        """
        Copy the list values into a numpy array.

        Args:
            dtype (data-type, optional): Desired array dtype. If None, numpy infers it. Defaults to None.
            reverse (bool, optional): Copy from tail to head instead. Defaults to False.

        Returns:
            np.array: The list values.
        """
        values = self.traverseBackward() if reverse else self.traverseForward()
        return np.array(list(values),dtype=dtype)

    def __iter__(self):
        """
        Make the DoublyLinkedList iterable.

        Returns:
            iterator: An iterator over the list values in forward or reverse order
                     depending on the reverseIteration setting.
        """
        if not self.reverseIteration:
            return self.traverseForward()
        else:
            return self.traverseBackward()

    def __reversed__(self):
        return self.traverseBackward()

    def __len__(self):
        return self.numNodes

    def __contains__(self,value):
        return self.contains(value)

    def __str__(self):
        return self.render()


if __name__ == "__main__":
    dlist = DoublyLinkedList()
    for i in range(1,5):
        dlist.add(i)
    dlist.printList()
    dlist.printReverse()

    dlist.remove(3)
    dlist.printList()

    print(dlist.contains(2))
    print(dlist.contains(3))
    print(dlist.size())
