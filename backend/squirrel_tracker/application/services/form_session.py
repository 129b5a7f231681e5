"""Transient state of the add/edit sighting form."""

import logging
from enum import Enum

from squirrel_tracker.application.services.sighting_controller import SightingController
from squirrel_tracker.application.services.sighting_validation import validate_sighting_form
from squirrel_tracker.domain.entities import Sighting, SightingDraft
from squirrel_tracker.domain.exceptions import FormValidationError, SessionClosedError

logger = logging.getLogger(__name__)


class FormState(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class FormSession:
    """Single-slot holder for the one form that can be open at a time.

    Opening a new session while one is open simply overwrites it.
    """

    def __init__(self, controller: SightingController):
        self._controller = controller
        self.state = FormState.CLOSED
        self.target: Sighting | None = None
        self.values = SightingDraft()
        self.errors: dict[str, str] = {}

    @property
    def is_open(self) -> bool:
        return self.state is not FormState.CLOSED

    @property
    def title(self) -> str:
        return "Edit Squirrel" if self.state is FormState.EDITING else "Add New Squirrel"

    @property
    def submit_label(self) -> str:
        return "Update Squirrel" if self.state is FormState.EDITING else "Add Squirrel"

    def open_for_create(self) -> None:
        self._reset()
        self.state = FormState.CREATING

    def open_for_edit(self, sighting: Sighting) -> None:
        self._reset()
        self.target = sighting
        self.values = SightingDraft.from_sighting(sighting)
        self.state = FormState.EDITING

    def cancel(self) -> None:
        self._reset()

    async def confirm(self, values: SightingDraft) -> bool:
        """Validate and submit ``values``.

        Returns True once the controller saved them and the session closed.
        On a validation error or a failed save the session stays open and
        keeps ``values`` so the user can retry.
        """
        if not self.is_open:
            raise SessionClosedError("No sighting form is open")

        self.values = values
        try:
            form = validate_sighting_form(values)
        except FormValidationError as exc:
            self.errors = exc.errors
            logger.debug("Form blocked: %s", exc)
            return False

        self.errors = {}
        editing_id = self.target.id if self.target is not None else None
        saved = await self._controller.submit(form, editing_id=editing_id)
        if saved:
            self._reset()
        return saved

    def _reset(self) -> None:
        self.state = FormState.CLOSED
        self.target = None
        self.values = SightingDraft()
        self.errors = {}
