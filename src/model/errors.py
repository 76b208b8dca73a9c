class InvalidKeyError(ValueError):
    """Raised for an unrecognized state key or filing status."""


class InvalidInputError(ValueError):
    """Raised when a request value fails boundary validation."""
