import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so random palettes are reproducible."""
    return np.random.default_rng(1234)
