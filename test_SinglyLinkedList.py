from SinglyLinkedList import SinglyLinkedList

import logging
import numpy as np


def GenerateRandomValues(numValues, lb=-5, ub=5):
    return np.random.randint(lb, ub, numValues).tolist()


def test_ReferenceScenario(capsys):
    llist = SinglyLinkedList()
    for i in [1, 2, 3, 4]:
        llist.add(i)

    llist.printList()
    llist.remove(3)
    llist.printList()

    out = capsys.readouterr().out.splitlines()
    assert out == ["1 -> 2 -> 3 -> 4 -> null", "1 -> 2 -> 4 -> null"]

    assert llist.contains(2)
    assert not llist.contains(3)
    assert llist.size() == 3


def test_Empty():
    llist = SinglyLinkedList()

    assert llist.size() == 0
    assert len(llist) == 0
    assert llist.isEmpty()
    assert not llist.contains(0)
    assert not llist.contains(None)
    assert str(llist) == "null"
    assert list(llist.traverse()) == []

    assert llist.remove(1) is False
    assert llist.headNode is None


def test_AddPreservesOrder():
    for numValues in [1, 2, 10, 50]:
        data = GenerateRandomValues(numValues)
        llist = SinglyLinkedList(data)

        assert list(llist.traverse()) == data
        assert llist.size() == numValues


def test_TraverseIsRestartable():
    llist = SinglyLinkedList([5, 6, 7])

    first = llist.traverse()
    assert next(first) == 5

    assert list(llist.traverse()) == [5, 6, 7]
    assert list(first) == [6, 7]
    assert list(llist) == [5, 6, 7]


def test_RemoveFirstOccurrenceOnly():
    llist = SinglyLinkedList([1, 2, 3, 2, 1])

    assert llist.remove(2)
    assert list(llist) == [1, 3, 2, 1]

    assert llist.remove(1)
    assert list(llist) == [3, 2, 1]

    assert llist.remove(1)
    assert list(llist) == [3, 2]
    assert llist.size() == 2


def test_RemoveAbsent():
    llist = SinglyLinkedList(["a", "b", "c"])

    assert llist.remove("z") is False
    assert list(llist) == ["a", "b", "c"]


def test_RemoveAll():
    llist = SinglyLinkedList([1, 2, 3])
    for i in [2, 1, 3]:
        llist.remove(i)

    assert llist.isEmpty()
    assert str(llist) == "null"


def test_ContainsMatchesPythonList():
    data = GenerateRandomValues(30)
    llist = SinglyLinkedList(data)
    expected = list(data)

    for v in GenerateRandomValues(15):
        llist.remove(v)
        if v in expected:
            expected.remove(v)

        assert list(llist) == expected
        for w in range(-5, 5):
            assert llist.contains(w) == (w in expected)
            assert (w in llist) == (w in expected)


def test_ToArray():
    llist = SinglyLinkedList([1, 2, 4])

    assert np.array_equal(llist.toArray(), np.array([1, 2, 4]))
    assert llist.toArray(dtype=float).dtype == np.float64
    assert SinglyLinkedList().toArray().shape == (0,)


def CloseLogHandlers(llist):
    for handler in list(llist.logger.handlers):
        handler.close()
        llist.logger.removeHandler(handler)


def test_LogFile(tmp_path):
    logFile = tmp_path / "singly.log"
    llist = SinglyLinkedList(logFile=str(logFile), logLevel=logging.DEBUG)

    llist.add(1)
    llist.remove(7)
    CloseLogHandlers(llist)

    text = logFile.read_text()
    assert "SINGLY_LINKED_LIST." in text
    assert " - DEBUG - " in text
    assert "Added 1 as the head node." in text
    assert "value not found" in text


def test_LogFilesAreKeptPerList(tmp_path):
    logA = tmp_path / "a.log"
    logB = tmp_path / "b.log"

    la = SinglyLinkedList(logFile=str(logA), logLevel=logging.DEBUG)
    lb = SinglyLinkedList(logFile=str(logB), logLevel=logging.DEBUG)
    lb.add("from_b")

    lc = SinglyLinkedList()
    lc.add("from_c")
    la.add("after_c")

    assert la.logger is not lb.logger
    assert la.logger.getEffectiveLevel() == logging.DEBUG
    assert lc.logger.getEffectiveLevel() == logging.WARNING

    CloseLogHandlers(la)
    CloseLogHandlers(lb)

    textA = logA.read_text()
    textB = logB.read_text()
    assert "after_c" in textA
    assert "from_b" not in textA
    assert "from_b" in textB
    assert "after_c" not in textB
    assert "from_c" not in textA + textB


def test_CustomLogger():
    logger = logging.getLogger("custom_singly")
    llist = SinglyLinkedList(logger=logger)

    assert llist.logger is logger


if __name__ == "__main__":
    test_AddPreservesOrder()
