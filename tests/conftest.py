import pytest
from hypothesis import strategies as st

from fivedice.game.dice import Face

hands = st.lists(st.integers(min_value=1, max_value=6), min_size=5, max_size=5)


def scripted_source(*values):
    """Face source that replays the given values in order."""
    it = iter(values)

    def next_face():
        return Face(next(it))

    return next_face


@pytest.fixture
def scripted():
    return scripted_source
