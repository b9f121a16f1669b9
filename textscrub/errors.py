"""Domain exceptions for text normalization diagnostics."""

from __future__ import annotations


class EncodingError(ValueError):
    """Raised when input text is not valid UTF-8 or cannot be represented as such."""

    def __init__(
        self,
        *,
        operation: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an operation-scoped encoding error."""

        super().__init__(detail)
        self.operation = operation
        self.detail = detail
        self.hint = hint
