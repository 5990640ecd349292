__all__ = ["InvalidStep"]


class InvalidStep(ValueError):
    """Raised when a slice is given a step of zero."""

    def __init__(self, message: str = "slice step cannot be zero", /) -> None:
        super().__init__(message)
