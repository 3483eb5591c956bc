"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found")


class MovieValidationError(Exception):
    """Raised when caller-supplied movie data violates a field constraint."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)
