"""Error hierarchy for revision display resolution.

Configuration errors indicate a setup defect the integrator must fix and are
always surfaced to the caller. Data anomalies (null foreign keys, deleted or
unknown targets) never raise; they map to display strings instead.
"""


class RevisionistError(Exception):
    """Base exception for all revisionist errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RevisionistConfigurationError(RevisionistError):
    """Raised when schemas or format rules are misconfigured.

    Never swallowed by the value resolution pipeline.
    """

    pass


class UnsupportedFormatKindError(RevisionistConfigurationError):
    """Raised when a format rule names a kind with no registered formatter."""

    def __init__(self, kind: str, field: str | None = None) -> None:
        location = f" for field '{field}'" if field else ""
        super().__init__(f"Unsupported format kind '{kind}'{location}")
        self.kind = kind
        self.field = field


class InvalidFormatRuleError(RevisionistConfigurationError):
    """Raised when a format rule cannot be parsed or applied as configured."""

    pass


class SchemaNotRegisteredError(RevisionistConfigurationError):
    """Raised when a caller explicitly requires a schema that is not registered."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"No schema registered for entity type '{entity_type}'")
        self.entity_type = entity_type


class DuplicateSchemaError(RevisionistConfigurationError):
    """Raised when an entity type is registered twice."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"Schema already registered for entity type '{entity_type}'")
        self.entity_type = entity_type


class EntityStoreError(RevisionistError):
    """Raised when the entity store backend fails.

    Store implementations wrap backend-specific errors in this type.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigFileError(RevisionistConfigurationError):
    """Raised when a configuration file cannot be parsed."""

    def __init__(self, path: str, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause else ""
        super().__init__(f"Invalid configuration file {path}{detail}")
        self.path = path
        self.cause = cause


class InvalidEntityDefinitionError(RevisionistConfigurationError):
    """Raised when an [entities.*] table does not describe a valid schema."""

    def __init__(self, entity_type: str, sources: list[str], details: str) -> None:
        origin = ", ".join(sources) or "configuration"
        super().__init__(f"Invalid entity definition '{entity_type}' in {origin}: {details}")
        self.entity_type = entity_type
        self.sources = sources
        self.details = details
