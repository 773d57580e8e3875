"""
Reactive State - Observable field containers for JokoUI components

🔄 Write interception:
A ``ReactiveState`` wraps a plain mapping of named fields. Every attribute (or
item) write is compared against the stored value and, when it actually changed,
the change listener is invoked synchronously with a ``Change`` record before the
write returns.

Reads of nested mapping values return a fresh ``ReactiveState`` over the same
underlying mapping with the same listener, so ``state.user.name = "x"`` notifies
the owner as well. Sequence values are returned as-is and are not tracked.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Mapping, MutableMapping, Optional

_MISSING = object()

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


@dataclass(frozen=True)
class Change:
    """A single tracked field write, passed to the change listener."""
    field: str
    old_value: Any
    new_value: Any
    state: Dict[str, Any]


ChangeListener = Callable[[Change], Any]


def _number_family(value: Any) -> Optional[type]:
    if isinstance(value, bool):
        return bool
    if isinstance(value, (int, float)):
        return float
    return None


def has_changed(old: Any, new: Any) -> bool:
    """Strict inequality between a stored value and an incoming one.

    Primitives compare by type and value (``1`` and ``1.0`` are the same number,
    ``True`` and ``1`` are not, NaN never equals itself). Anything else compares
    by identity, so assigning an equal but distinct dict or list is a change.
    """
    if old is _MISSING:
        return True
    if isinstance(old, _PRIMITIVES) and isinstance(new, _PRIMITIVES):
        old_family, new_family = _number_family(old), _number_family(new)
        if old_family is not None or new_family is not None:
            if old_family is not new_family:
                return True
            if isinstance(old, float) and math.isnan(old):
                return True
            return old != new
        return type(old) is not type(new) or old != new
    return old is not new


def _is_nested(value: Any) -> bool:
    return isinstance(value, MutableMapping) and not isinstance(value, ReactiveState)


class ReactiveState:
    """Observable view over a private mapping of fields.

    Missing fields read as ``None`` and writing one creates it. There is no
    schema; any name is accepted.

    The helpers ``get`` and ``to_dict`` win over fields of the same name on
    attribute access. Item access (``state["get"]``) always reaches the field.
    """

    __slots__ = ("_target", "_on_change")

    def __init__(self, target: MutableMapping[str, Any], on_change: Optional[ChangeListener] = None):
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_on_change", on_change)

    def _read(self, name: str) -> Any:
        value = self._target.get(name)
        if _is_nested(value):
            # a new view on every read; nested writes reach the same listener
            return ReactiveState(value, self._on_change)
        return value

    def _write(self, name: str, value: Any) -> None:
        old_value = self._target.get(name, _MISSING)
        if not has_changed(old_value, value):
            return

        self._target[name] = value
        if callable(self._on_change):
            self._on_change(Change(
                field=name,
                old_value=None if old_value is _MISSING else old_value,
                new_value=value,
                state=dict(self._target),
            ))

    def __getattr__(self, name: str) -> Any:
        if name in ReactiveState.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return self._read(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._write(name, value)

    def __getitem__(self, name: str) -> Any:
        return self._read(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self._write(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._target

    def __iter__(self) -> Iterator[str]:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def get(self, name: str, default: Any = None) -> Any:
        """Read a field, falling back to ``default`` when it is absent."""
        if name not in self._target:
            return default
        return self._read(name)

    def to_dict(self) -> Dict[str, Any]:
        """Shallow copy of the current fields."""
        return dict(self._target)

    def __repr__(self) -> str:
        return f"ReactiveState({self._target!r})"


def create_reactive_state(initial: Optional[Mapping[str, Any]] = None,
                          on_change: Optional[ChangeListener] = None) -> ReactiveState:
    """Create a reactive view over a private shallow copy of ``initial``."""
    return ReactiveState(dict(initial or {}), on_change)


__all__ = ["Change", "ChangeListener", "ReactiveState", "create_reactive_state", "has_changed"]
