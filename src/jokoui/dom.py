"""
JokoUI DOM Management

Presentation tree, event dispatch and the mount/patch mechanism.

The live tree is a BeautifulSoup document wrapped by ``Document``. Components
are composed into it through their capabilities only: ``render()`` produces
markup, and the optional ``on_mount``/``on_update``/``on_unmount`` hooks are
looked up and called when present. Every update replaces the component's whole
subtree; there is no diffing.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .errors import MountTargetNotFound, RenderError

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "html.parser"

# marker attribute -> event type
EVENT_MARKERS = {
    "data-joko-click": "click",
    "data-joko-input": "input",
    "data-joko-submit": "submit",
}

Listener = Callable[["Event"], Any]


class Event:
    """A simulated user interaction travelling from its target up to the root."""

    def __init__(self, type: str, target: Tag, value: Any = None, **detail):
        self.type = type
        self.target = target
        self.current_target: Optional[Tag] = None
        self.value = value
        self.detail = detail
        self.default_prevented = False
        self.propagation_stopped = False
        self.pending: List[Awaitable] = []
        self.results: List[Any] = []

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True

    async def settled(self) -> List[Any]:
        """Wait for every asynchronous handler started by this event and return their results."""
        if not self.pending:
            return list(self.results)
        return self.results + list(await asyncio.gather(*self.pending))

    def __repr__(self) -> str:
        return f"Event(type={self.type!r}, target=<{self.target.name}>)"


class Document:
    """
    Live presentation tree.

    Provides the host operations the runtime needs: lookup by id, clearing
    children, inserting, replacing and removing nodes, querying descendants and
    per-element event listeners.
    """

    def __init__(self, html: str = "", parser: str = DEFAULT_PARSER):
        self.parser = parser
        self.soup = BeautifulSoup(html, parser)
        self._listeners: Dict[int, Tuple[Tag, Dict[str, Listener]]] = {}

    @classmethod
    def from_html(cls, html: str, parser: str = DEFAULT_PARSER) -> "Document":
        return cls(html, parser=parser)

    def get_element_by_id(self, element_id: str) -> Optional[Tag]:
        return self.soup.find(id=element_id)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def query_all(self, node: Tag, selector: str) -> List[Tag]:
        """Descendants of ``node`` matching ``selector`` (``node`` itself excluded)."""
        return node.select(selector)

    def clear_children(self, node: Tag) -> None:
        for child in list(node.contents):
            self._detach(child)
        node.clear()

    def append_child(self, parent: Tag, node: Tag) -> Tag:
        parent.append(node)
        return node

    def replace(self, old: Tag, new: Tag) -> Tag:
        self._forget(old)
        old.replace_with(new)
        return new

    def remove(self, node: Tag) -> None:
        self._detach(node)

    def _detach(self, node) -> None:
        self._forget(node)
        node.extract()

    def _forget(self, node) -> None:
        if not isinstance(node, Tag):
            return
        self._listeners.pop(id(node), None)
        for descendant in node.find_all(True):
            self._listeners.pop(id(descendant), None)

    # Event listeners

    def set_listener(self, element: Tag, event_type: str, listener: Listener) -> None:
        """Assign the listener for ``event_type`` on ``element``, replacing any previous one."""
        _, listeners = self._listeners.setdefault(id(element), (element, {}))
        listeners[event_type] = listener

    def get_listener(self, element: Tag, event_type: str) -> Optional[Listener]:
        entry = self._listeners.get(id(element))
        if entry is None or entry[0] is not element:
            return None
        return entry[1].get(event_type)

    def listener_count(self) -> int:
        return sum(len(listeners) for _, listeners in self._listeners.values())

    def dispatch(self, target: Tag, event_type: str, value: Any = None, **detail) -> Event:
        """
        Fire ``event_type`` at ``target`` and bubble it to its ancestors.

        Returns the event. Coroutine handlers run synchronously up to their
        first suspension, then continue as tasks on the running loop; those
        tasks are kept on ``event.pending`` and ``event.settled()`` waits for
        them. Without a running loop a coroutine handler runs to completion
        before ``dispatch`` returns.
        """
        event = Event(event_type, target, value=value, **detail)
        node = target
        while node is not None and not event.propagation_stopped:
            listener = self.get_listener(node, event_type) if isinstance(node, Tag) else None
            if listener is not None:
                event.current_target = node
                _collect(event, listener(event))
            node = node.parent
        return event

    def click(self, target: Tag) -> Event:
        return self.dispatch(target, "click")

    def input(self, target: Tag, value: Any) -> Event:
        target["value"] = "" if value is None else str(value)
        return self.dispatch(target, "input", value=value)

    def submit(self, target: Tag, **detail) -> Event:
        return self.dispatch(target, "submit", **detail)

    def html(self) -> str:
        return str(self.soup)

    def __repr__(self) -> str:
        return f"Document({self.html()[:60]!r})"


def _collect(event: Event, result: Any) -> None:
    if inspect.iscoroutine(result):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            event.results.append(asyncio.run(result))
            return
        # the handler body runs now, up to its first real suspension
        event.pending.append(asyncio.eager_task_factory(loop, result))
    elif inspect.isawaitable(result):
        event.pending.append(result)
    else:
        event.results.append(result)


def parse_fragment(markup: str, parser: str = DEFAULT_PARSER) -> Tag:
    """Parse render output into a single detached root element."""
    if not isinstance(markup, str):
        raise RenderError(f"render() must return a string, got {type(markup).__name__}")

    fragment = BeautifulSoup(markup.strip(), parser)
    if not fragment.contents:
        raise RenderError("render() produced no markup", markup)

    root = fragment.contents[0]
    if not isinstance(root, Tag):
        raise RenderError("render() output must start with a single root element", markup)

    extra = [node for node in fragment.contents[1:] if isinstance(node, Tag) or str(node).strip()]
    if extra:
        logger.warning(f"render() produced {len(extra)} extra top-level node(s); only <{root.name}> is used")

    return root.extract()


def _document_of(component) -> Document:
    document = getattr(component, "_document", None)
    if document is None:
        raise RenderError(f"{type(component).__name__} is not attached to a document")
    return document


def _run_hook(component, name: str) -> None:
    hook = getattr(component, name, None)
    if callable(hook):
        hook()


def mount(component, host_id: str, document: Document):
    """
    Mount ``component`` into the element with id ``host_id``.

    Renders, replaces the host's children with the parsed root, binds event
    markers and calls ``on_mount``. Returns the component.

    Raises:
        MountTargetNotFound: if no element has id ``host_id``
        RenderError: if the render output has no root element
    """
    target = document.get_element_by_id(host_id)
    if target is None:
        raise MountTargetNotFound(host_id)

    element = parse_fragment(component.render(), document.parser)

    document.clear_children(target)
    document.append_child(target, element)

    component._document = document
    component._element = element
    component._mounted = True

    bind_events(component)
    logger.debug(f"Mounted {type(component).__name__} into #{host_id}")

    _run_hook(component, "on_mount")
    return component


def unmount(component) -> None:
    """Remove a mounted component from the tree. No-op if it is not mounted."""
    if not (getattr(component, "_mounted", False) and getattr(component, "_element", None) is not None):
        return

    _run_hook(component, "on_unmount")

    _document_of(component).remove(component._element)
    component._element = None
    component._mounted = False
    logger.debug(f"Unmounted {type(component).__name__}")


def patch(component) -> None:
    """Re-render a mounted component and swap its live subtree for the new one."""
    old = getattr(component, "_element", None)
    if old is None:
        return

    document = _document_of(component)
    element = parse_fragment(component.render(), document.parser)

    document.replace(old, element)
    component._element = element

    bind_events(component)
    logger.debug(f"Updated {type(component).__name__}")

    _run_hook(component, "on_update")


def _make_listener(handler: Callable, event_type: str) -> Listener:
    if event_type == "submit":
        def listener(event: Event):
            event.prevent_default()
            return handler(event)
    else:
        def listener(event: Event):
            return handler(event)
    return listener


def bind_events(component) -> None:
    """
    Bind ``data-joko-*`` markers below the component's live element.

    Each marker value names a method on the component. Markers naming a
    missing method are skipped.
    """
    element = getattr(component, "_element", None)
    if element is None:
        return

    document = _document_of(component)
    for marker, event_type in EVENT_MARKERS.items():
        for node in document.query_all(element, f"[{marker}]"):
            method_name = node.get(marker)
            handler = getattr(component, method_name, None) if method_name else None
            if not callable(handler):
                logger.debug(f"No handler {method_name!r} on {type(component).__name__} for {marker}")
                continue
            document.set_listener(node, event_type, _make_listener(handler, event_type))


__all__ = [
    "Document",
    "Event",
    "EVENT_MARKERS",
    "parse_fragment",
    "mount",
    "unmount",
    "patch",
    "bind_events",
]
