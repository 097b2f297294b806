"""Domain-specific exceptions — framework-independent.

Mutation handlers never raise these; they report failures as values.
The exceptions are used at the edges: lookups by id, the HTTP layer and
startup wiring.
"""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidCredentialsError(Exception):
    """Raised when an email/password pair matches no account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid credentials for '{email}'")


class NotAuthenticatedError(Exception):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self) -> None:
        super().__init__("No user is signed in")


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required configuration: {', '.join(missing)}"
        )


class BackendClientError(Exception):
    """Raised when the hosted backend answers with an error status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[backend] {status_code}: {message}")
