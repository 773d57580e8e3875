"""
JokoUI Components

A component is anything that can render itself to markup. ``Component`` adds
the runtime bookkeeping most components want: a reactive ``state`` whose
tracked writes re-render the component while it is mounted.

Lifecycle hooks are optional capabilities. Define ``on_mount``, ``on_update``
or ``on_unmount`` on a component and the mount mechanism calls them after the
corresponding tree operation (``on_unmount`` runs while the node is still
attached).

Example:
    ```python
    class Counter(Component):
        def __init__(self):
            super().__init__()
            self.set_state({"count": 0})

        def increment(self, event):
            self.state.count += 1

        def render(self):
            return f'<div><span>{self.state.count}</span>' \\
                   f'<button data-joko-click="increment">+</button></div>'

    mount(Counter(), "app", Document('<div id="app"></div>'))
    ```
"""

import logging
from typing import Any, Mapping, Optional, Protocol, runtime_checkable
from bs4 import Tag

from .dom import Document, mount, patch, unmount
from .errors import RenderNotImplementedError
from .state import Change, ReactiveState, create_reactive_state

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders its entire current visual state to one root element."""

    def render(self) -> str:
        ...


class Component:
    """Base runtime for reactive components."""

    def __init__(self, initial_state: Optional[Mapping[str, Any]] = None):
        self._mounted = False
        self._element: Optional[Tag] = None
        self._document: Optional[Document] = None
        self.state: ReactiveState = create_reactive_state(initial_state, self._on_state_change)

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def element(self) -> Optional[Tag]:
        """The live root node, or ``None`` while unmounted."""
        return self._element

    def set_state(self, fields: Mapping[str, Any]) -> None:
        """
        Replace the whole state with a shallow copy of ``fields``.

        This rebuilds the reactive container; it does not render. A mounted
        component shows the new values on its next tracked write.
        """
        self.state = create_reactive_state(fields, self._on_state_change)

    def render(self) -> str:
        raise RenderNotImplementedError(self)

    def mount(self, host_id: str, document: Document) -> "Component":
        return mount(self, host_id, document)

    def unmount(self) -> None:
        unmount(self)

    def _on_state_change(self, change: Change) -> None:
        if not self._mounted:
            return
        logger.debug(f"{type(self).__name__}.{change.field}: {change.old_value!r} -> {change.new_value!r}")
        patch(self)

    def __repr__(self) -> str:
        status = "mounted" if self._mounted else "unmounted"
        return f"<{type(self).__name__} {status} state={self.state.to_dict()!r}>"


__all__ = ["Renderable", "Component"]
