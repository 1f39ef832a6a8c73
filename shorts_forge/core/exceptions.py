"""
Errors raised by the blueprint generation engine
"""


class ValidationError(ValueError):
    """Raised when a generation request cannot be normalized (empty topic)"""

    def __init__(self, message: str = "Topic is required.") -> None:
        super().__init__(message)
        self.message = message
