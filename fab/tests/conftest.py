import pytest

from fab.examples.domain import Dog
from fab.factory import Factory
from .blocks import block_of


@pytest.fixture
def dog_fab() -> Factory[Dog]:
    """Factory with the schnuffi defaults."""
    return Factory(
        Dog,
        block_of(
            ("name", lambda: "schnuffi"),
            ("age", lambda: 5),
            ("weight", lambda: 10),
            ("speed", lambda attrs: "slow" if attrs["weight"] > 25 else "fast"),
        ),
    )


@pytest.fixture
def big_dog_fab(dog_fab: Factory[Dog]) -> Factory[Dog]:
    """Child factory making heavy, fast dogs."""
    return Factory(
        Dog,
        block_of(("weight", lambda: 100), ("speed", lambda: 1000)),
        parent=dog_fab,
    )
