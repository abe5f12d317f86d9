"""Exceptions raised while compiling an API site."""


class ApisiteError(Exception):
    """Base class for all errors that abort a run."""


class ConfigurationError(ApisiteError):
    """Raised when a required configuration entry is missing or malformed."""


class OutputDirectoryError(ApisiteError):
    """Raised when the output directory does not exist."""


class CyclicHierarchyError(ApisiteError):
    """Raised when a chain of parent types loops back on itself."""

    def __init__(self, name: str, chain: list[str]) -> None:
        """Record the type that closed the cycle and the chain walked so far."""
        self.name = name
        self.chain = chain
        super().__init__(
            f"Cyclic parent chain at {name}: {' -> '.join([*chain, name])}"
        )


class ModelError(ApisiteError):
    """Raised when a model file cannot be turned into type entities."""
