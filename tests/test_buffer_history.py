from __future__ import annotations

from termpad.buffer import Delete, Document, HistoryLog, Insert


def test_undo_insert_removes_inserted_character() -> None:
    document = Document("ac")
    history = HistoryLog()
    document.insert(1, "b")
    history.record(Insert(1, "b"))

    cursor = history.undo(document)

    assert document.text == "ac"
    assert cursor == 1


def test_undo_delete_reinserts_character_in_place() -> None:
    document = Document("abc")
    history = HistoryLog()
    removed = document.delete(2)
    history.record(Delete(1, removed))

    cursor = history.undo(document)

    assert document.text == "abc"
    assert cursor == 2


def test_undo_on_empty_log_is_noop() -> None:
    document = Document("abc")
    history = HistoryLog()

    assert history.undo(document) is None
    assert document.text == "abc"
    assert document.version == 0


def test_undo_is_lifo_without_redo() -> None:
    document = Document("")
    history = HistoryLog()
    for offset, char in enumerate("xy"):
        document.insert(offset, char)
        history.record(Insert(offset, char))

    assert history.undo(document) == 1
    assert document.text == "x"
    assert history.undo(document) == 0
    assert document.text == ""
    assert len(history) == 0
    assert history.can_undo() is False
    assert history.undo(document) is None
