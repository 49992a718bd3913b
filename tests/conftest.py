import pytest

from armath import configure, set_sink


@pytest.fixture
def messages():
    """Capture everything sent to the diagnostic sink."""
    received = []
    previous = set_sink(received.append)
    yield received
    set_sink(previous)


@pytest.fixture
def default_config():
    yield configure()
    configure()
