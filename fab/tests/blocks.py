"""
Helpers for building declarative blocks and rule lists in tests.

Rule producers built here return ``(tag, name)`` so tests can tell which
layer a merged rule came from.
"""

from typing import Any, Callable, List, Sequence, Tuple

from fab.recorder import RuleRecorder
from fab.rules import Rule


def block_of(
    *declarations: Tuple[str, Callable[..., Any]]
) -> Callable[[RuleRecorder], None]:
    """Block declaring each ``(name, producer)`` pair in order"""

    def block(r: RuleRecorder) -> None:
        for name, producer in declarations:
            r.declare(name, producer)

    return block


def tagged_rules(names: Sequence[str], tag: str) -> List[Rule]:
    return [
        Rule(name=name, producer=lambda name=name: (tag, name))
        for name in names
    ]


def names_of(rules: Sequence[Rule]) -> List[str]:
    return [rule.name for rule in rules]


def sources_of(rules: Sequence[Rule]) -> List[Tuple[str, str]]:
    return [rule.produce({}) for rule in rules]
