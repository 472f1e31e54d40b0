"""Exceptions raised by the translation coordinator."""


class TranslationError(Exception):
    """Base class for translation cache errors."""


class CoordinatorNotInitializedError(TranslationError):
    """Raised when the process-wide coordinator is used before init."""

    def __init__(self, accessor: str = "get_coordinator"):
        super().__init__(
            f"{accessor}() called before init_coordinator(); "
            "initialize the translation coordinator at startup"
        )
        self.accessor = accessor


class CoordinatorDisposedError(TranslationError):
    """Raised when a coordinator is used after dispose()."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot call {operation}() on a disposed coordinator")
        self.operation = operation
