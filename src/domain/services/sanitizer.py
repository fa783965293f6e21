"""Normalization of raw profile input before validation and persistence."""

import re
from collections.abc import Mapping

from domain.entities.profile import EDITABLE_FIELDS

PHONE_SEPARATORS = re.compile(r"[\s\-()]")


def strip_phone_separators(value: str) -> str:
    """Remove whitespace, hyphens and parentheses from a phone number."""
    return PHONE_SEPARATORS.sub("", value)


def sanitize(draft: Mapping[str, str | None]) -> dict[str, str]:
    """Return the editable fields of ``draft`` in canonical form.

    Never rejects anything. Missing or None fields become empty strings and
    keys outside the editable set are dropped, so the result is a fixed
    point: ``sanitize(sanitize(x)) == sanitize(x)``.
    """
    clean: dict[str, str] = {}
    for name in EDITABLE_FIELDS:
        value = draft.get(name) or ""
        if name == "phone":
            clean[name] = strip_phone_separators(value)
        else:
            clean[name] = value.strip()
    return clean
