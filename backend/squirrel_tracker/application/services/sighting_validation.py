"""Required-field checks run before a form is allowed to reach the store."""

from dataclasses import asdict

from pydantic import ValidationError

from squirrel_tracker.application.schemas import SightingForm
from squirrel_tracker.domain.entities import SightingDraft
from squirrel_tracker.domain.exceptions import FormValidationError

REQUIRED_FIELD_MESSAGES: dict[str, str] = {
    "name": "Please enter a name for the squirrel!",
    "species": "Please select a species!",
    "location": "Please enter the location!",
}


def validate_sighting_form(draft: SightingDraft) -> SightingForm:
    """Turn a draft into a validated form or raise FormValidationError.

    Each field reports at most one message.
    """
    try:
        return SightingForm.model_validate(asdict(draft))
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            errors.setdefault(field, REQUIRED_FIELD_MESSAGES.get(field, error["msg"]))
        raise FormValidationError(errors) from exc
