import numpy as np
import pytest

from orrery.data_models import AppState
from orrery.scene_builder import build_scene


class FakeSurface:
    """Stands in for the pygame renderer as a resizable surface."""

    def __init__(self, width=1100, height=800):
        self.size = (width, height)

    def resize(self, width, height):
        self.size = (width, height)


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def world(state):
    return build_scene(state, rng=np.random.default_rng(1234))


@pytest.fixture
def surface():
    return FakeSurface()
