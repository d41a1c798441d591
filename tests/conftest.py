import os
import random

# Run pygame without a real display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from simulation import SimulationState


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def empty_state(rng):
    return SimulationState(rng=rng, seed_circle=False)
