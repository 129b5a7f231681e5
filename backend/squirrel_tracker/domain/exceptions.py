"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class FormValidationError(Exception):
    """Raised when required form fields are missing.

    ``errors`` maps each offending field name to the message shown next to it.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid form fields: {fields}")


class RecordStoreError(Exception):
    """Raised when a record store returns something that cannot be interpreted.

    Store-agnostic — works for the HTTP store or any other adapter.
    """

    def __init__(self, store: str, message: str):
        self.store = store
        self.message = message
        super().__init__(f"[{store}] {message}")


class SessionClosedError(Exception):
    """Raised when a form session is confirmed without being opened."""
