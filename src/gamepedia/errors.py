"""
Faults a single request can hit.

Both end the request with an empty 500 response; the process keeps serving.
"""


class GamepediaError(Exception):
    """Base class for all Gamepedia request faults."""


class SerializationFault(GamepediaError):
    """Raised when the stored games cannot be rendered as JSON."""


class FormDecodeFault(GamepediaError):
    """Raised when a request body cannot be parsed as form data."""
