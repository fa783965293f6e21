"""Unit tests for profile input sanitization."""

from domain.entities.profile import EDITABLE_FIELDS
from domain.services.sanitizer import sanitize, strip_phone_separators


class TestStripPhoneSeparators:
    def test_removes_spaces_hyphens_and_parentheses(self):
        assert strip_phone_separators("(0790) 454-647") == "0790454647"

    def test_keeps_plus_sign(self):
        assert strip_phone_separators("+40 790 454 647") == "+40790454647"

    def test_removes_tabs_and_newlines(self):
        assert strip_phone_separators("0790\t454\n647") == "0790454647"


class TestSanitize:
    def test_trims_text_fields(self):
        result = sanitize(
            {
                "name": "  Ana Popescu ",
                "location": "\tCluj-Napoca\n",
                "description": "  Piese auto  ",
                "website": " https://ana.example.ro ",
            }
        )

        assert result["name"] == "Ana Popescu"
        assert result["location"] == "Cluj-Napoca"
        assert result["description"] == "Piese auto"
        assert result["website"] == "https://ana.example.ro"

    def test_inner_whitespace_is_preserved(self):
        result = sanitize({"name": "Ana  Maria", "description": "Linia 1\nLinia 2"})

        assert result["name"] == "Ana  Maria"
        assert result["description"] == "Linia 1\nLinia 2"

    def test_phone_separators_stripped(self):
        assert sanitize({"phone": " 0790-454 647 "})["phone"] == "0790454647"

    def test_missing_and_none_become_empty(self):
        result = sanitize({"name": None})

        assert result == {name: "" for name in EDITABLE_FIELDS}

    def test_drops_non_editable_keys(self):
        result = sanitize({"name": "Ana", "email": "x@example.com", "verified": "true"})

        assert set(result) == set(EDITABLE_FIELDS)

    def test_never_rejects_invalid_values(self):
        result = sanitize({"name": "R2-D2", "phone": "abc"})

        assert result["name"] == "R2-D2"
        assert result["phone"] == "abc"

    def test_is_idempotent(self):
        draft = {
            "name": "  Ion Ionescu ",
            "phone": "+40 (790) 454-647",
            "location": " sector 3 ",
            "description": " Mașini second hand ",
            "website": "",
        }

        once = sanitize(draft)

        assert sanitize(once) == once

    def test_input_is_not_mutated(self):
        draft = {"name": "  Ana  "}

        sanitize(draft)

        assert draft == {"name": "  Ana  "}
