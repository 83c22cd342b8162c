"""Profile completeness gate.

Decides whether a signed-in member still has to provide their personal
information, and accepts that information exactly once.

    LOADING --lookup hit--> COMPLETE
    LOADING --lookup miss--> NEEDS_COMPLETION --submit ok--> COMPLETE
    LOADING --failure--> ERROR (call load() again to retry)
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, Callable, Protocol
from uuid import UUID

import structlog

from core.exceptions import (
    AppException,
    AuthenticationError,
    FetchError,
    GateStateError,
    InvalidDateError,
    MissingFieldError,
    ProfileAlreadyCompleteError,
)
from domain.entities.owner_info import OwnerInfo
from domain.services.eligibility import ensure_eligible
from domain.services.validation import require_text

logger = structlog.get_logger()


class GateState(StrEnum):
    """Lifecycle of a single gate instance."""

    LOADING = "loading"
    NEEDS_COMPLETION = "needs_completion"
    COMPLETE = "complete"
    ERROR = "error"


class OwnerInfoStore(Protocol):
    """Data access the gate depends on."""

    async def lookup(self, owner_id: UUID) -> OwnerInfo | None:
        """Return the owner's record, or None if there is none.

        Raises:
            FetchError: If the store could not be read
        """
        ...

    async def create(self, record: OwnerInfo) -> OwnerInfo:
        """Insert a new record.

        Raises:
            PersistenceError: If the insert failed
        """
        ...


@dataclass
class CompletionForm:
    """Values submitted by the member, kept for retry after a failure."""

    full_name: str = ""
    birth_date: Any = None
    nationality: str = ""


class ProfileGate:
    """Per-member state machine guarding access until owner info exists."""

    def __init__(
        self,
        owner_id: UUID | None,
        store: OwnerInfoStore,
        cutoff_year: int,
        now: Callable[[], datetime],
    ) -> None:
        self._owner_id = owner_id
        self._store = store
        self._cutoff_year = cutoff_year
        self._now = now
        self.state = GateState.LOADING
        self.record: OwnerInfo | None = None
        self.form = CompletionForm()
        self.last_error: AppException | None = None

    @property
    def owner_id(self) -> UUID | None:
        return self._owner_id

    async def load(self) -> GateState:
        """Look up the owner's record and settle into a non-loading state.

        Failures are recorded on ``last_error`` rather than raised so the
        caller can inspect the ERROR state and retry.
        """
        self.state = GateState.LOADING
        self.last_error = None

        if self._owner_id is None:
            return self._fail(AuthenticationError("Signed-in member could not be identified"))

        try:
            record = await self._store.lookup(self._owner_id)
        except AppException as e:
            return self._fail(e)

        if record is None:
            self.record = None
            self.form = CompletionForm()
            self.state = GateState.NEEDS_COMPLETION
        else:
            self.record = record
            self.state = GateState.COMPLETE
        return self.state

    async def submit_completion(
        self,
        full_name: str | None,
        birth_date: Any,
        nationality: str | None,
    ) -> OwnerInfo:
        """Validate and persist the member's personal information.

        Raises:
            ProfileAlreadyCompleteError: If the record already exists
            GateStateError: If the gate has not been loaded successfully
            MissingFieldError: If a required field is blank
            InvalidDateError: If the birth date is unparseable or in the future
            IneligibleError: If the birth year is at or after the cutoff
            PersistenceError: If the insert failed
        """
        if self.state == GateState.COMPLETE:
            raise ProfileAlreadyCompleteError(str(self._owner_id))
        if self.state != GateState.NEEDS_COMPLETION or self._owner_id is None:
            raise GateStateError(self.state.value)

        self.form = CompletionForm(
            full_name=full_name or "",
            birth_date=birth_date,
            nationality=nationality or "",
        )
        self.last_error = None

        try:
            record = self._validate(self._owner_id, self.form)
            created = await self._store.create(record)
        except AppException as e:
            self.last_error = e
            logger.info(
                "profile_completion_rejected",
                owner_id=str(self._owner_id),
                error_code=e.error_code.value,
            )
            raise

        logger.info("owner_info_created", owner_id=str(self._owner_id))

        # The stored row is the source of truth from here on.
        try:
            refreshed = await self._store.lookup(self._owner_id)
        except FetchError:
            logger.warning("owner_info_refetch_failed", owner_id=str(self._owner_id))
            refreshed = None

        self.record = refreshed or created
        self.state = GateState.COMPLETE
        return self.record

    def _validate(self, owner_id: UUID, form: CompletionForm) -> OwnerInfo:
        full_name = require_text(form.full_name, "full_name")
        if form.birth_date is None or (
            isinstance(form.birth_date, str) and not form.birth_date.strip()
        ):
            raise MissingFieldError("birth_date")
        nationality = require_text(form.nationality, "nationality")

        born = ensure_eligible(form.birth_date, self._cutoff_year)
        if born > self._now().date():
            raise InvalidDateError(born.isoformat(), "Birth date is in the future")

        return OwnerInfo(
            owner_id=owner_id,
            full_name=full_name,
            birth_date=born,
            nationality=nationality,
        )

    def _fail(self, error: AppException) -> GateState:
        self.last_error = error
        self.state = GateState.ERROR
        logger.warning(
            "profile_gate_error",
            owner_id=str(self._owner_id) if self._owner_id else None,
            error_code=error.error_code.value,
        )
        return self.state
