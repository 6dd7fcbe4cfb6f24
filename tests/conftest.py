import pytest

from fabrik2d import Chain, ChainConfig, Vector2


@pytest.fixture
def two_segment_chain():
    """Origin (0, 0), two segments of length 50, tolerance 0.5, 10 iterations."""
    return Chain.with_lengths(Vector2(0.0, 0.0), [50.0, 50.0], 0.5, 10)


@pytest.fixture
def default_chain():
    """Eight segments of length 50 at the origin, in the rest pose."""
    return Chain(Vector2(0.0, 0.0), ChainConfig())
