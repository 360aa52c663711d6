import pytest

from debug import Debug


@pytest.fixture(autouse=True)
def quiet_debug():
    """Leave the shared component switches as each test found them."""
    saved = Debug().status()
    yield
    Debug._components.update(saved)
    Debug._enabled = True
