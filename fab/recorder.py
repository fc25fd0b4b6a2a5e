"""
Recording of declarative blocks into ordered rule sequences.

A declarative block is any callable taking a single ``RuleRecorder``. It
declares rules by calling ``declare(name, producer)``; nothing is evaluated
while recording::

    def defaults(r):
        r.declare("name", lambda: "schnuffi")
        r.declare("speed", lambda attrs: "slow" if attrs["weight"] > 25 else "fast")
"""

import logging
from collections import Counter
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from fab.errors import DuplicateRule, InvalidRule
from fab.rules import Producer, Rule

logger = logging.getLogger(__name__)

Block = Callable[["RuleRecorder"], Any]


def find_duplicate_names(rules: Iterable[Rule]) -> List[str]:
    """Names occurring more than once, in first-occurrence order"""
    names = [rule.name for rule in rules]
    counts = Counter(names)
    return [name for name in dict.fromkeys(names) if counts[name] > 1]


class RuleRecorder:
    """Captures rule declarations, in call order, into a target list."""

    def __init__(self, record_target: List[Rule]) -> None:
        self._record_target = record_target

    def declare(self, name: str, producer: Producer) -> "RuleRecorder":
        if not name:
            raise InvalidRule(name, problem="rule name cannot be empty")
        if not callable(producer):
            raise InvalidRule(
                name, f"{type(producer).__name__} is not callable"
            )
        rule = Rule(name=name, producer=producer)
        self._record_target.append(rule)
        logger.debug(
            "Rule recorded",
            extra={"rule_name": rule.name, "position": len(self._record_target)},
        )
        return self


class RuleSequence:
    """
    Ordered, name-unique list of rules recorded from one declarative block.

    Raises:
        DuplicateRule: If the block declares the same name more than once
    """

    def __init__(self, block: Optional[Block] = None) -> None:
        recorded: List[Rule] = []
        if block is not None:
            block(RuleRecorder(recorded))

        duplicates = find_duplicate_names(recorded)
        if duplicates:
            logger.error(
                "Duplicate rules in declarative block",
                extra={"duplicate_names": duplicates},
            )
            raise DuplicateRule(duplicates)

        self._rules: Tuple[Rule, ...] = tuple(recorded)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSequence({self.names!r})"
