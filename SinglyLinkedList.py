from LinkedListNode import SinglyLinkedListNode
from LinkedListLogger import BuildLogger

import logging
import numpy as np


class SinglyLinkedList:
    """
    A singly-linked list with forward-only links.

    Only the head node is tracked, so appending walks the list to find the
    last node. Removing a value that is not present, or operating on an empty
    list, is a silent no-op.

    Attributes:
        headNode (SinglyLinkedListNode): First node in the list, or None if the list is empty.
        logger (logging.Logger): Logger for debugging output.
    """
    def __init__(self,arr=[],logFile=None,logLevel=logging.WARNING,logger: logging.Logger = None):
        """
        Initialize a new singly linked list.

        Args:
            arr (iterable, optional): Initial elements to add, in order. Defaults to [].
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        self.logger = BuildLogger("SINGLY_LINKED_LIST",logFile,logLevel,logger)
        self.headNode = None

        for e in arr:
            self.add(e)

    def add(self,value):
        """
        Add a new element to the end of the list.

        Args:
            value: The value to append to the list.
        """
        newNode = SinglyLinkedListNode(value)

        if self.headNode is None:
            self.headNode = newNode
            self.logger.debug("Added %s as the head node.", value)
            return

        nodei = self.headNode
        while nodei.nextNode is not None:
            nodei = nodei.nextNode
        nodei.nextNode = newNode
        self.logger.debug("Added %s after %s.", value, nodei.value)

    def remove(self,value):
        """
        Remove the first node (from head to tail) whose value equals the given value.

        Args:
            value: The value to remove.

        Returns:
            bool: True if a node was removed, False if no node held the value.
        """
        if self.headNode is None:
            self.logger.debug("Ignoring removal of %s from an empty list.", value)
            return False

        if self.headNode.value == value:
            self.headNode = self.headNode.nextNode
            self.logger.debug("Removed %s from the head of the list.", value)
            return True

        nodei = self.headNode
        while nodei.nextNode is not None:
            if nodei.nextNode.value == value:
                nodei.nextNode = nodei.nextNode.nextNode
                self.logger.debug("Removed %s following %s.", value, nodei.value)
                return True
            nodei = nodei.nextNode

        self.logger.debug("Ignoring removal of %s: value not found.", value)
        return False

    def contains(self,value):
        for e in self.traverse():
            if e == value:
                return True
        return False

    def size(self):
        count = 0
        nodei = self.headNode
        while nodei is not None:
            count += 1
            nodei = nodei.nextNode
        return count

    def isEmpty(self):
        return self.headNode is None

    def traverse(self):
        """
        Iterate over the stored values from head to tail.

        Each call returns a fresh generator, so traversal can be restarted at any time.

        Returns:
            generator: The list values in order.
        """
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def render(self):
        """
        Build the display string for this list, e.g. "1 -> 2 -> 3 -> null".

        Returns:
            str: The values joined by "->" and terminated by "null".
        """
        return " -> ".join([str(e) for e in self.traverse()] + ["null"])

    def printList(self):
        print(self.render())

    def toArray(self,dtype=None):
        """
        Copy the list values into a numpy array.

        Args:
            dtype (data-type, optional): Desired array dtype. If None, numpy infers it. Defaults to None.

        Returns:
            np.array: The values in head-to-tail order.
        """
        return np.array(list(self.traverse()),dtype=dtype)

    def __iter__(self):
        return self.traverse()

    def __len__(self):
        return self.size()

    def __contains__(self,value):
        return self.contains(value)

    def __str__(self):
        return self.render()


if __name__ == "__main__":
    llist = SinglyLinkedList()
    for i in range(1,5):
        llist.add(i)
    llist.printList()

    llist.remove(3)
    llist.printList()

    print(llist.contains(2))
    print(llist.contains(3))
    print(llist.size())
