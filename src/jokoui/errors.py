"""
JokoUI Errors

Exception taxonomy for the runtime:

- Configuration errors: a mount target that does not exist, render output
  without a parseable root element.
- Render contract violations: a component that never implemented ``render()``.
- Network errors: non-2xx responses and timeouts raised by the HTTP client.
"""

from typing import Any, Optional


class JokoError(Exception):
    """Base class for all JokoUI errors."""


class MountTargetNotFound(JokoError, LookupError):
    """Raised when the host element for a mount cannot be found."""

    def __init__(self, host_id: str):
        self.host_id = host_id
        super().__init__(f'Target element with id "{host_id}" not found')


class RenderError(JokoError):
    """Raised when render output cannot be parsed into a single root element."""

    def __init__(self, message: str, markup: Optional[str] = None):
        super().__init__(message)
        self.markup = markup


class RenderNotImplementedError(JokoError, NotImplementedError):
    """Raised when a component does not implement ``render()``."""

    def __init__(self, component: Any = None):
        name = type(component).__name__ if component is not None else "Component"
        super().__init__(f"{name} must implement render() method")


class HttpError(JokoError):
    """Raised for non-2xx responses. The failed response is kept on ``response``."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response

    @property
    def status(self) -> Optional[int]:
        return getattr(self.response, "status", None)


class RequestTimeoutError(JokoError, TimeoutError):
    """Raised when a request does not complete within the configured timeout."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Request timeout after {int(round(timeout * 1000))}ms")


__all__ = [
    "JokoError",
    "MountTargetNotFound",
    "RenderError",
    "RenderNotImplementedError",
    "HttpError",
    "RequestTimeoutError",
]
