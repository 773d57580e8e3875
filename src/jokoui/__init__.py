"""
JokoUI - A minimal reactive UI runtime

Tracks mutable component state, re-renders a component's markup when a tracked
field changes and rebinds its declarative ``data-joko-*`` event handlers after
every render.
"""

from .errors import (
    JokoError, MountTargetNotFound, RenderError, RenderNotImplementedError,
    HttpError, RequestTimeoutError,
)
from .state import Change, ReactiveState, create_reactive_state
from .dom import Document, Event, EVENT_MARKERS, parse_fragment, mount, unmount, patch, bind_events
from .component import Component, Renderable
from .client import ClientConfig, HttpClient, HttpResponse
from .config import ApplicationConfig, Environment, LoggingConfig, RuntimeConfig, configure_logging
from .ui import VElement, create_element, render_to_string

__version__ = "1.0.0"

__all__ = [
    # State
    'Change',
    'ReactiveState',
    'create_reactive_state',

    # Components and the presentation tree
    'Component',
    'Renderable',
    'Document',
    'Event',
    'EVENT_MARKERS',
    'parse_fragment',
    'mount',
    'unmount',
    'patch',
    'bind_events',

    # HTTP
    'ClientConfig',
    'HttpClient',
    'HttpResponse',

    # Configuration
    'ApplicationConfig',
    'Environment',
    'LoggingConfig',
    'RuntimeConfig',
    'configure_logging',

    # Virtual elements
    'VElement',
    'create_element',
    'render_to_string',

    # Errors
    'JokoError',
    'MountTargetNotFound',
    'RenderError',
    'RenderNotImplementedError',
    'HttpError',
    'RequestTimeoutError',
]
