"""Unit tests for note identifiers."""

import pytest

from simplenotes.core.exceptions import MalformedIdentifierError
from simplenotes.core.identifiers import ID_LENGTH, is_valid_note_id, new_note_id, parse_note_id


class TestNewNoteId:
    def test_has_identifier_shape(self):
        note_id = new_note_id()

        assert len(note_id) == ID_LENGTH
        assert is_valid_note_id(note_id)
        assert note_id == note_id.lower()

    def test_ids_are_unique(self):
        ids = {new_note_id() for _ in range(1000)}

        assert len(ids) == 1000


class TestIdentifierShape:
    @pytest.mark.parametrize(
        "value",
        [
            "5a3d5da59070081a82a3445b",
            "5A3D5DA59070081A82A3445B",
            "000000000000000000000000",
        ],
    )
    def test_valid_ids(self, value):
        assert is_valid_note_id(value)

    @pytest.mark.parametrize(
        "value",
        [
            "5a3d5da59070081a82a3445",  # one char short
            "5a3d5da59070081a82a3445bc",  # one char long
            "5a3d5da59070081a82a3445g",  # not hex
            "5a3d5da59070081a82a3445b\n",  # trailing newline
            "\n5a3d5da59070081a82a3445b",
            "",
            None,
            12345,
        ],
    )
    def test_invalid_ids(self, value):
        assert not is_valid_note_id(value)

    def test_parse_normalizes_case(self):
        assert parse_note_id("5A3D5DA59070081A82A3445B") == "5a3d5da59070081a82a3445b"

    def test_parse_rejects_malformed_id(self):
        with pytest.raises(MalformedIdentifierError) as exc_info:
            parse_note_id("5a3d5da59070081a82a3445")

        assert exc_info.value.message == "malformatted id"
        assert exc_info.value.context["identifier"] == "5a3d5da59070081a82a3445"


def test_parse_rejects_id_with_trailing_newline():
    with pytest.raises(MalformedIdentifierError):
        parse_note_id("5a3d5da59070081a82a3445b\n")
