import numpy as np
import pytest


def _sawtooth(num_timepoints, rise, fall):
    """Periodic triangle wave between 0 and 1, starting at a trough, rising
    for ``rise`` samples and falling for ``fall`` samples."""
    phase = np.arange(num_timepoints) % (rise + fall)
    return np.where(phase < rise, phase/rise, 1 - (phase - rise)/fall)


@pytest.fixture
def sawtooth():
    return _sawtooth


@pytest.fixture
def noisy_triangles():
    """200 noisy copies of one asymmetric cycle: 30 samples up, 70 down."""
    rs = np.random.RandomState(42)
    shape = _sawtooth(100, 30, 70)
    return shape[None, :] + 0.05*rs.standard_normal((200, 100))
