"""
NoteKeeper Backend — NoteStore Unit Tests
===========================================

What we test:
    ✅ Ids are assigned in order and never reused after deletes
    ✅ Seeded stores start with the welcome notes and counter at 3
    ✅ Callers get copies, not the stored objects
    ✅ Concurrent adds never hand out the same id
"""

import threading
from datetime import timedelta

from notekeeper.store import WELCOME_NOTES, NoteStore


class TestNoteStore:

    def test_ids_increase(self, note_store, fixed_now):
        first = note_store.add("one", fixed_now)
        second = note_store.add("two", fixed_now)

        assert (first.id, second.id) == (1, 2)
        assert [n.content for n in note_store.all()] == ["one", "two"]

    def test_ids_not_reused_after_delete(self, note_store, fixed_now):
        note_store.add("one", fixed_now)
        last = note_store.add("two", fixed_now)
        assert note_store.remove(last.id) is True

        replacement = note_store.add("three", fixed_now)
        assert replacement.id == 3
        assert note_store.next_id == 4

    def test_seeded(self, fixed_now):
        store = NoteStore.seeded(fixed_now)

        notes = store.all()
        assert [n.id for n in notes] == [1, 2]
        assert [n.content for n in notes] == list(WELCOME_NOTES)
        assert store.next_id == 3

    def test_update(self, note_store, fixed_now):
        note = note_store.add("draft", fixed_now)
        later = fixed_now + timedelta(minutes=5)

        updated = note_store.update(note.id, "final", later)

        assert updated.content == "final"
        assert updated.created_at == fixed_now
        assert updated.updated_at == later

    def test_update_missing(self, note_store, fixed_now):
        assert note_store.update(1, "x", fixed_now) is None

    def test_remove_missing(self, note_store):
        assert note_store.remove(1) is False

    def test_returns_copies(self, note_store, fixed_now):
        note = note_store.add("original", fixed_now)
        note.content = "mutated outside"
        note_store.all()[0].content = "also mutated"

        assert note_store.get(note.id).content == "original"

    def test_concurrent_adds_get_unique_ids(self, note_store, fixed_now):
        ids = []
        ids_lock = threading.Lock()

        def worker():
            for _ in range(200):
                note = note_store.add("x", fixed_now)
                with ids_lock:
                    ids.append(note.id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ids) == 1600
        assert len(set(ids)) == 1600
        assert note_store.next_id == 1601
