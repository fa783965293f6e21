"""Edit session state machine for an owner editing their own profile.

    VIEWING --start_edit--> EDITING --submit--> SAVING --ok--> VIEWING
                               ^                   |
                               +------failed-------+

Each resolved submit emits exactly one typed outcome to subscribers, so
notification and caching live outside the session.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Protocol
from uuid import UUID

import structlog

from core.exceptions import (
    AppException,
    AuthorizationError,
    FieldNotEditableError,
    InvalidSessionStateError,
    ProfileValidationError,
)
from domain.entities.profile import EDITABLE_FIELDS, Profile, ProfileFields
from domain.services.sanitizer import sanitize
from domain.services.validator import validate

logger = structlog.get_logger()

UNEXPECTED_SAVE_ERROR = "Profile could not be saved, please try again"


class EditStatus(StrEnum):
    """Edit session states."""

    VIEWING = "viewing"
    EDITING = "editing"
    SAVING = "saving"


@dataclass(frozen=True, slots=True)
class ProfileSaved:
    """The store accepted the edit; ``profile`` is the new committed value."""

    profile: Profile


@dataclass(frozen=True, slots=True)
class ValidationFailed:
    """The draft was rejected by field validation."""

    errors: dict[str, str]


@dataclass(frozen=True, slots=True)
class SaveFailed:
    """The store failed to persist the draft."""

    message: str


EditOutcome = ProfileSaved | ValidationFailed | SaveFailed
OutcomeListener = Callable[[EditOutcome], None]


class IProfileWriter(Protocol):
    """Persists the editable fields of a profile."""

    async def update_profile(self, owner_id: UUID, fields: ProfileFields) -> Profile:
        """Write the fields and return the stored profile."""
        ...


class EditSession:
    """Coordinates sanitize -> validate -> persist -> reconcile for one owner."""

    def __init__(self, committed: Profile, *, is_owner: bool, writer: IProfileWriter) -> None:
        self._committed = committed
        self._is_owner = is_owner
        self._writer = writer
        self._status = EditStatus.VIEWING
        self._draft: dict[str, str] = {}
        self._errors: dict[str, str] = {}
        self._error_message: str | None = None
        self._listeners: list[OutcomeListener] = []

    @property
    def status(self) -> EditStatus:
        return self._status

    @property
    def committed(self) -> Profile:
        return self._committed

    @property
    def draft(self) -> dict[str, str] | None:
        if self._status is EditStatus.VIEWING:
            return None
        return dict(self._draft)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def error_message(self) -> str | None:
        return self._error_message

    def subscribe(self, listener: OutcomeListener) -> Callable[[], None]:
        """Register an outcome listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start_edit(self) -> None:
        """Enter editing with a draft seeded from the committed profile."""
        if not self._is_owner:
            raise AuthorizationError("Only the profile owner can edit this profile")
        self._require(EditStatus.VIEWING, "start editing")

        self._draft = self._committed.editable_fields().as_dict()
        self._errors = {}
        self._error_message = None
        self._status = EditStatus.EDITING

    def change_field(self, field_name: str, value: str) -> None:
        """Update one draft field and clear that field's error only."""
        self._require(EditStatus.EDITING, "change a field")
        if field_name not in EDITABLE_FIELDS:
            raise FieldNotEditableError(field_name)

        self._draft[field_name] = value
        self._errors.pop(field_name, None)

    def cancel(self) -> None:
        """Discard the draft and return to viewing. Committed is untouched."""
        self._require(EditStatus.EDITING, "cancel")
        self._draft = {}
        self._errors = {}
        self._error_message = None
        self._status = EditStatus.VIEWING

    async def submit(self) -> EditOutcome | None:
        """Validate the draft and, if clean, persist it.

        Returns the emitted outcome, or None when a submit is already in
        flight (the second call is ignored).
        """
        if self._status is EditStatus.SAVING:
            logger.debug("profile_submit_ignored", owner_id=str(self._committed.owner_id))
            return None
        self._require(EditStatus.EDITING, "submit")

        self._status = EditStatus.SAVING
        self._errors = {}
        self._error_message = None

        clean = sanitize(self._draft)
        errors = validate(clean)
        if errors:
            return self._reject(errors)

        try:
            stored = await self._writer.update_profile(
                self._committed.owner_id, ProfileFields(**clean)
            )
        except ProfileValidationError as exc:
            return self._reject(exc.errors)
        except AppException as exc:
            return self._fail(exc.message)
        except Exception:
            logger.exception("profile_edit_writer_error", owner_id=str(self._committed.owner_id))
            return self._fail(UNEXPECTED_SAVE_ERROR)

        return self._succeed(stored)

    def _succeed(self, stored: Profile) -> EditOutcome:
        # Only the store's echo of the editable fields is taken; identity,
        # email and verification stay as committed.
        echo = stored.editable_fields()
        self._committed = replace(
            self._committed,
            name=echo.name,
            phone=echo.phone or None,
            location=echo.location or None,
            description=echo.description or None,
            website=echo.website or None,
            updated_at=stored.updated_at,
        )
        self._draft = {}
        self._errors = {}
        self._status = EditStatus.VIEWING
        logger.info("profile_edit_saved", owner_id=str(self._committed.owner_id))
        return self._emit(ProfileSaved(profile=self._committed))

    def _reject(self, errors: dict[str, str]) -> EditOutcome:
        self._errors = dict(errors)
        self._status = EditStatus.EDITING
        logger.debug("profile_edit_invalid", fields=sorted(errors))
        return self._emit(ValidationFailed(errors=dict(errors)))

    def _fail(self, message: str) -> EditOutcome:
        self._error_message = message
        self._status = EditStatus.EDITING
        logger.warning(
            "profile_edit_save_failed",
            owner_id=str(self._committed.owner_id),
            error=message,
        )
        return self._emit(SaveFailed(message=message))

    def _emit(self, outcome: EditOutcome) -> EditOutcome:
        for listener in list(self._listeners):
            listener(outcome)
        return outcome

    def _require(self, expected: EditStatus, operation: str) -> None:
        if self._status is not expected:
            raise InvalidSessionStateError(operation, self._status.value)
