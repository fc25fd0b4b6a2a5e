"""
Rule model: a named attribute-production instruction.

A rule pairs an attribute name with a producer. Producers either take no
argument, or exactly one argument which receives the attributes produced so
far in the current evaluation pass.
"""

import inspect
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from fab.errors import InvalidRule

Producer = Callable[..., Any]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def producer_arity(name: str, producer: Producer) -> int:
    """
    Return how many arguments a producer must be called with.

    Args:
        name: Rule name, used in error messages
        producer: The callable to inspect

    Returns:
        0 or 1

    Raises:
        InvalidRule: If the producer is not callable or needs anything other
            than zero or one positional argument
    """
    if not callable(producer):
        raise InvalidRule(name, f"{type(producer).__name__} is not callable")

    try:
        signature = inspect.signature(producer)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures (list, dict, ...)
        return 0

    required = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            raise InvalidRule(name, "variable positional arguments")
        if parameter.default is not inspect.Parameter.empty:
            continue
        if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
            raise InvalidRule(
                name, f"required keyword argument '{parameter.name}'"
            )
        if parameter.kind in _POSITIONAL:
            required += 1

    if required > 1:
        raise InvalidRule(name, f"{required} required arguments")
    return required


class Rule(BaseModel):
    """A single recorded ``name <- producer`` declaration.

    Rules are immutable once recorded. Names are opaque tokens compared exactly
    as given. The producer is kept unevaluated until the factory applies the
    final rule sequence; its arity is checked once, on construction.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    producer: Producer

    _arity: int = PrivateAttr(default=0)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Rule name cannot be empty")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._arity = producer_arity(self.name, self.producer)

    @property
    def arity(self) -> int:
        return self._arity

    def produce(self, accumulator: Mapping[str, Any]) -> Any:
        if self._arity == 1:
            return self.producer(accumulator)
        return self.producer()
