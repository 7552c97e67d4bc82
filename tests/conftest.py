"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pychisq.table.render import RecordingRenderer


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def renderer():
    """Renderer that records every frame instead of drawing."""
    return RecordingRenderer()


@pytest.fixture
def ask_ints():
    """Factory for an ask_int stub answering from a fixed list."""
    def make(*answers):
        queue = list(answers)
        prompts = []

        def ask_int(prompt):
            prompts.append(prompt)
            return queue.pop(0)

        ask_int.prompts = prompts
        return ask_int
    return make
