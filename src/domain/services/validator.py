"""Field-level acceptance rules for user-submitted profile data.

Each field is checked independently and reports at most one message, the
first rule it fails. Optional fields left blank are always accepted; only
``name`` is mandatory.
"""

import re
from collections.abc import Callable, Mapping

from domain.services.sanitizer import strip_phone_separators

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
LOCATION_MIN_LENGTH = 2
LOCATION_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500

NAME_PATTERN = re.compile(r"[a-zA-ZăâîșțĂÂÎȘȚ\s\-.]+")
PHONE_PATTERN = re.compile(r"0[0-9]{9}|\+4[0-9]{10}")
WEBSITE_PATTERN = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"[-a-zA-Z0-9()@:%_+.~#?&/=]*"
)

ROMANIAN_CITIES: tuple[str, ...] = (
    "București", "Cluj-Napoca", "Timișoara", "Iași", "Constanța", "Craiova",
    "Brașov", "Galați", "Ploiești", "Oradea", "Bacău", "Pitești", "Arad",
    "Sibiu", "Târgu Mureș", "Baia Mare", "Buzău", "Botoșani", "Satu Mare",
    "Râmnicu Vâlcea", "Drobeta-Turnu Severin", "Suceava", "Piatra Neamț",
    "Târgu Jiu", "Tulcea", "Focșani", "Bistrița", "Reșița", "Alba Iulia",
    "Deva", "Hunedoara", "Slatina", "Vaslui", "Călărași", "Giurgiu",
    "Slobozia", "Zalău", "Turda", "Mediaș", "Onești", "Gheorgheni", "Pașcani",
    "Dej", "Reghin", "Roman",
)
LOCATION_TOKENS: tuple[str, ...] = ("românia", "romania", "sector", "județ", "judet")

_LOCATION_NEEDLES = tuple(city.lower() for city in ROMANIAN_CITIES) + LOCATION_TOKENS

NAME_REQUIRED = "Name is required"
NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters"
NAME_TOO_LONG = f"Name cannot exceed {NAME_MAX_LENGTH} characters"
NAME_INVALID = "Name may only contain letters, spaces, hyphens and periods"
PHONE_INVALID = "Phone number is not valid (e.g. 0790454647 or +40790454647)"
LOCATION_TOO_SHORT = f"Location must be at least {LOCATION_MIN_LENGTH} characters"
LOCATION_TOO_LONG = f"Location cannot exceed {LOCATION_MAX_LENGTH} characters"
LOCATION_NOT_ROMANIAN = (
    "Please specify a city in Romania (e.g. București, Cluj-Napoca, Timișoara)"
)
DESCRIPTION_TOO_SHORT = f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
DESCRIPTION_TOO_LONG = f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
WEBSITE_INVALID = "Website must be a valid URL (e.g. https://example.com)"


def _check_name(value: str) -> str | None:
    if not value:
        return NAME_REQUIRED
    if len(value) < NAME_MIN_LENGTH:
        return NAME_TOO_SHORT
    if len(value) > NAME_MAX_LENGTH:
        return NAME_TOO_LONG
    if not NAME_PATTERN.fullmatch(value):
        return NAME_INVALID
    return None


def _check_phone(value: str) -> str | None:
    if not PHONE_PATTERN.fullmatch(strip_phone_separators(value)):
        return PHONE_INVALID
    return None


def is_known_location(value: str) -> bool:
    """Case-insensitive allow-list match on Romanian cities and region tokens."""
    lowered = value.lower()
    return any(needle in lowered for needle in _LOCATION_NEEDLES)


def _check_location(value: str) -> str | None:
    if len(value) < LOCATION_MIN_LENGTH:
        return LOCATION_TOO_SHORT
    if len(value) > LOCATION_MAX_LENGTH:
        return LOCATION_TOO_LONG
    if not is_known_location(value):
        return LOCATION_NOT_ROMANIAN
    return None


def _check_description(value: str) -> str | None:
    if len(value) < DESCRIPTION_MIN_LENGTH:
        return DESCRIPTION_TOO_SHORT
    if len(value) > DESCRIPTION_MAX_LENGTH:
        return DESCRIPTION_TOO_LONG
    return None


def _check_website(value: str) -> str | None:
    if not WEBSITE_PATTERN.fullmatch(value):
        return WEBSITE_INVALID
    return None


_OPTIONAL_RULES: dict[str, Callable[[str], str | None]] = {
    "phone": _check_phone,
    "location": _check_location,
    "description": _check_description,
    "website": _check_website,
}


def validate(candidate: Mapping[str, str | None]) -> dict[str, str]:
    """Check candidate profile data.

    Returns a mapping of failing field -> message. An empty mapping means
    the data may be persisted. The candidate is not modified.
    """
    errors: dict[str, str] = {}

    name_error = _check_name((candidate.get("name") or "").strip())
    if name_error:
        errors["name"] = name_error

    for field_name, rule in _OPTIONAL_RULES.items():
        value = (candidate.get(field_name) or "").strip()
        if not value:
            continue
        message = rule(value)
        if message:
            errors[field_name] = message

    return errors
