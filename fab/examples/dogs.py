"""
Dog and cat factories showing defaults, overrides and inheritance.

``big_dog_with_cat_fab`` builds its ``cat`` attribute by calling another
factory from inside a producer.
"""

from typing import List

from pydantic import BaseModel

from fab.examples.domain import Cat, Dog
from fab.factory import Factory


def _dog_defaults(r):
    r.declare("name", lambda: "schnuffi")
    r.declare("age", lambda: 5)
    r.declare("weight", lambda: 10)
    r.declare("speed", lambda attrs: "slow" if attrs["weight"] > 25 else "fast")


def _big_dog(r):
    r.declare("weight", lambda: 100)
    r.declare("speed", lambda: 1000)


dog_fab = Factory(Dog, _dog_defaults)

big_dog_fab = Factory(Dog, _big_dog, parent=dog_fab)

cat_fab = Factory(
    Cat,
    lambda r: r.declare("name", lambda: "mauzi").declare("food", lambda: "fish"),
)

big_dog_with_cat_fab = Factory(
    Dog,
    lambda r: r.declare(
        "cat",
        lambda: cat_fab.create(lambda c: c.declare("name", lambda: "miez")),
    ),
    parent=big_dog_fab,
)


def run_demo() -> List[BaseModel]:
    """Create one instance from each example layering"""
    return [
        dog_fab.create(),
        dog_fab.create(
            lambda r: r.declare("name", lambda: "fifi").declare(
                "weight", lambda: 100
            )
        ),
        big_dog_fab.create(lambda r: r.declare("name", lambda: "hasso")),
        cat_fab.create(),
        big_dog_with_cat_fab.create(),
    ]
