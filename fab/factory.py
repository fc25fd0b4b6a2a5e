"""
Factories building test fixture instances from layered rule sequences.

A ``Factory`` owns a target type, an optional parent factory and its own
declarative block. Each ``create`` call resolves the rule sequence afresh:

1. own rules = parent's own rules strictly merged with this factory's block
   (recursively up the parent chain), or just this block without a parent;
2. final rules = own rules strictly merged with the call-site overrides
   block, if one is given;
3. every rule is evaluated in final order into an accumulator, which
   one-argument producers can read;
4. the accumulated attributes are assigned onto a new target instance.

Example:
    >>> dog_fab = Factory(Dog, lambda r: r.declare("name", lambda: "rex"))
    >>> dog_fab.create(lambda r: r.declare("name", lambda: "fifi")).name
    'fifi'
"""

import inspect
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from fab.errors import UnknownAttribute
from fab.merge import StrictRuleMerger
from fab.recorder import Block, RuleSequence
from fab.rules import Rule

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AttributeCollector:
    """Evaluates rules in order, accumulating produced attribute values."""

    def __init__(self) -> None:
        self._attributes: Dict[str, Any] = {}

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    def apply(self, rule: Rule) -> None:
        logger.debug(
            "Applying rule",
            extra={"rule_name": rule.name, "arity": rule.arity},
        )
        # Producers only see what was produced before them
        self._attributes[rule.name] = rule.produce(
            MappingProxyType(self._attributes)
        )


def _exposes_field(instance: Any, attribute_name: str) -> bool:
    """Whether the target type declares a settable field of that name"""
    if isinstance(instance, BaseModel):
        if attribute_name in type(instance).model_fields:
            return True
    elif hasattr(instance, "__dict__"):
        return True
    descriptor = inspect.getattr_static(type(instance), attribute_name, None)
    return hasattr(descriptor, "__set__")


def assign_attributes(attributes: Dict[str, Any], instance: T) -> T:
    """
    Set each attribute on the instance, in accumulation order.

    Raises:
        UnknownAttribute: If the instance does not expose a field name.
            Errors raised for fields it does expose propagate unchanged.
    """
    for attribute_name, value in attributes.items():
        try:
            setattr(instance, attribute_name, value)
        except (AttributeError, ValueError) as e:
            if _exposes_field(instance, attribute_name):
                raise
            logger.error(
                "Target rejected attribute",
                extra={
                    "target_type": type(instance).__name__,
                    "attribute_name": attribute_name,
                    "error_message": str(e),
                },
            )
            raise UnknownAttribute(
                type(instance).__name__, attribute_name
            ) from e
    return instance


class Factory(Generic[T]):
    """
    Reusable construction template for one target type.

    Args:
        target: Type constructed with no arguments, then populated by
            setting named fields
        block: Declarative block declaring this factory's own rules
        parent: Factory whose own rules form the base of this one's

    Factories hold no state between calls; every ancestor block is recorded
    again on each resolution.
    """

    def __init__(
        self,
        target: Callable[[], T],
        block: Optional[Block] = None,
        *,
        parent: Optional["Factory[Any]"] = None,
    ) -> None:
        self._target = target
        self._block = block
        self._parent = parent

    @property
    def target(self) -> Callable[[], T]:
        return self._target

    @property
    def parent(self) -> Optional["Factory[Any]"]:
        return self._parent

    def own_rules(self) -> Tuple[Rule, ...]:
        declared = RuleSequence(self._block).rules
        if self._parent is None:
            return declared
        return StrictRuleMerger(self._parent.own_rules(), declared).rules

    def resolve(self, overrides: Optional[Block] = None) -> Tuple[Rule, ...]:
        """Final rule sequence for one call, overrides applied"""
        own = self.own_rules()
        if overrides is None:
            return own
        return StrictRuleMerger(own, RuleSequence(overrides).rules).rules

    def attributes(self, overrides: Optional[Block] = None) -> Dict[str, Any]:
        """Evaluate the final rule sequence without building an instance"""
        collector = AttributeCollector()
        for rule in self.resolve(overrides):
            collector.apply(rule)
        return collector.attributes

    def create(self, overrides: Optional[Block] = None) -> T:
        attributes = self.attributes(overrides)
        instance = assign_attributes(attributes, self._target())
        logger.debug(
            "Instance created",
            extra={
                "target_type": type(instance).__name__,
                "attribute_names": list(attributes),
            },
        )
        return instance

    def create_batch(
        self, size: int, overrides: Optional[Block] = None
    ) -> List[T]:
        """Create ``size`` independent instances with the same overrides"""
        if size < 0:
            raise ValueError("Batch size cannot be negative")
        return [self.create(overrides) for _ in range(size)]

    def __repr__(self) -> str:
        target_name = getattr(self._target, "__name__", repr(self._target))
        return f"Factory({target_name})"
