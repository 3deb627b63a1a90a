"""Error type for rejected payloads."""


class SchemaError(ValueError):
    """
    Input did not match a schema, or an instance could not be serialized.

    There is a single error type; callers treat any failure as "reject this
    input". The attributes exist so the message can be logged with context.

    Attributes:
        field: Name of the offending field, if any.
        owner: Name of the blueprint that declares the field.
        expected: Expected structural classification.
        actual: Classification of the value actually found.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        owner: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.owner = owner
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"SchemaError({self.message!r})"
