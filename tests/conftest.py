import os

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--tape-viz",
        action="store_true",
        help="Print tape diagrams produced during tests",
    )


def pytest_configure(config):
    if config.getoption("--tape-viz"):
        os.environ["TAPE_VIZ"] = "1"


class RecordingSurface:
    """Drawing surface that remembers every call as a tuple."""

    def __init__(self):
        self.calls = []
        self.color = None

    def set_color(self, r, g, b):
        self.color = (r, g, b)
        self.calls.append(("color", r, g, b))

    def fill_rectangle(self, x, y, w, h):
        self.calls.append(("rect", x, y, w, h, self.color))

    def fill_circle(self, x, y, radius):
        self.calls.append(("circle", x, y, radius, self.color))

    def circles(self):
        return [c for c in self.calls if c[0] == "circle"]

    def rects(self):
        return [c for c in self.calls if c[0] == "rect"]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def viz():
    """Return a printer that dumps diagrams when ``--tape-viz`` is given."""

    def _show(text):
        if os.environ.get("TAPE_VIZ"):
            print()
            print(text, end="")

    return _show
