"""
Exception types raised by the signature codec.
"""

from typing import Optional


class ParseError(SyntaxError):
    """Raised when signature or type text does not match the grammar."""

    def __init__(self, message: str, text: str = '', position: Optional[int] = None):
        reason = message
        if position is not None:
            message = f'{message} at position {position} in {text!r}'
        elif text:
            message = f'{message} in {text!r}'
        super().__init__(message)
        self.reason = reason
        self.text = text
        self.position = position

    def __str__(self) -> str:
        return self.msg


class InternalInvariantViolation(AssertionError):
    """Raised when the encoder or classifier is handed a value outside the type algebra."""
    pass
