"""
NoteKeeper Backend — Note Service Unit Tests
===============================================

What:  NoteService validation and CRUD rules, no HTTP involved.

What we test:
    ✅ Create trims content and assigns fresh ids
    ✅ Blank or missing content is rejected with no mutation
    ✅ Update keeps id/created_at and stamps updated_at
    ✅ Update validates content before looking the note up
    ✅ Unknown or non-numeric ids always raise NotFoundError
"""

from datetime import timedelta

import pytest

from notekeeper.exceptions import NotFoundError, ValidationError


class TestNoteServiceCreate:

    @pytest.mark.parametrize(
        "raw, expected",
        [("hello", "hello"), ("  padded  ", "padded"), ("\tline one\nline two\n", "line one\nline two")],
    )
    def test_create_trims(self, note_service, raw, expected):
        note = note_service.create_note(raw)
        assert note.content == expected

    def test_create_sets_created_at(self, note_service, fixed_now):
        note = note_service.create_note("hello")
        assert note.created_at == fixed_now
        assert note.updated_at is None

    @pytest.mark.parametrize("blank", [None, "", "   ", "\n\t "])
    def test_create_blank_rejected(self, note_service, note_store, blank):
        with pytest.raises(ValidationError, match="Content is required"):
            note_service.create_note(blank)
        assert len(note_store) == 0
        assert note_store.next_id == 1

    def test_create_then_list(self, note_service):
        created = note_service.create_note("round trip")
        listed = note_service.list_notes()

        assert [n.id for n in listed if n.content == "round trip"] == [created.id]


class TestNoteServiceUpdate:

    def test_update(self, note_service, clock, fixed_now):
        note = note_service.create_note("before")
        clock.now = fixed_now + timedelta(hours=1)

        updated = note_service.update_note(note.id, "  after ")

        assert updated.id == note.id
        assert updated.content == "after"
        assert updated.created_at == fixed_now
        assert updated.updated_at == fixed_now + timedelta(hours=1)

    def test_update_accepts_string_id(self, note_service):
        note = note_service.create_note("before")
        assert note_service.update_note(str(note.id), "after").content == "after"

    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_update_blank_rejected(self, note_service, blank):
        note = note_service.create_note("keep me")

        with pytest.raises(ValidationError, match="Content is required"):
            note_service.update_note(note.id, blank)
        assert note_service.list_notes()[0].content == "keep me"
        assert note_service.list_notes()[0].updated_at is None

    def test_update_validates_before_lookup(self, note_service):
        with pytest.raises(ValidationError):
            note_service.update_note(99999, "")

    def test_update_missing_is_repeatable(self, note_service):
        for _ in range(3):
            with pytest.raises(NotFoundError, match="Note not found"):
                note_service.update_note(99999, "content")


class TestNoteServiceDelete:

    def test_delete(self, note_service):
        note = note_service.create_note("bye")
        note_service.delete_note(note.id)
        assert note_service.list_notes() == []

    def test_delete_twice(self, note_service):
        note = note_service.create_note("bye")
        note_service.delete_note(note.id)
        with pytest.raises(NotFoundError):
            note_service.delete_note(note.id)

    def test_oversized_numeric_id(self, note_service):
        with pytest.raises(NotFoundError, match="Note not found"):
            note_service.update_note("7" * 5000, "content")
        with pytest.raises(NotFoundError):
            note_service.delete_note("7" * 5000)

    @pytest.mark.parametrize("note_id", ["abc", "1.5", "-1", "", "1e3", "٣"])
    def test_non_numeric_id(self, note_service, note_id):
        note_service.create_note("only note")
        with pytest.raises(NotFoundError):
            note_service.delete_note(note_id)
        assert len(note_service.list_notes()) == 1
