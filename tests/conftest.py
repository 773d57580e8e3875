"""Shared fixtures for the JokoUI test suite."""

import pytest

from jokoui import Component, Document


class Counter(Component):
    """Counter used across the runtime tests; records lifecycle calls."""

    def __init__(self):
        super().__init__()
        self.calls = []
        self.set_state({"count": 0})

    def increment(self, event):
        self.state.count = self.state.count + 1

    def reset(self, event):
        self.state.count = 0

    def on_mount(self):
        self.calls.append("mount")

    def on_update(self):
        self.calls.append("update")

    def on_unmount(self):
        self.calls.append(("unmount", self.element.parent is not None))

    def render(self):
        return f"""
            <div class="counter">
                <span class="count">{self.state.count}</span>
                <button data-joko-click="increment"><span class="icon">+</span> Increase</button>
                <button data-joko-click="reset">Reset</button>
            </div>
        """


@pytest.fixture
def document():
    return Document('<html><body><div id="app"><p>Loading...</p></div><div id="other"></div></body></html>')


@pytest.fixture
def counter():
    return Counter()
