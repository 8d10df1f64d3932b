import pytest
from foldfuse.source import RECURSION_LIMIT, cons_list


def recording(xs, visits):
    """
    Generator over xs which notes each value in visits as it is pulled.
    Lets a test see exactly how far a fold walked its source.
    """
    for x in xs:
        visits.append(x)
        yield x


@pytest.fixture
def visits():
    return []


@pytest.fixture
def deep_cons():
    """A cons list longer than the recursive right fold allows."""
    return cons_list(range(RECURSION_LIMIT * 4))
