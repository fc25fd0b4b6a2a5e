"""
Merge engine for layered rule sequences.

Given a base sequence and an overrides sequence, ``RuleMerger`` scans the
base left to right keeping a cursor into the overrides:

- a base rule with a matching pending override is replaced in place by that
  override, and every pending override before the match is inserted just
  ahead of it;
- a base rule without a match is kept unchanged;
- overrides still pending once the base is exhausted are appended.

The scan does not prevent duplicates when overrides name rules in an order
that contradicts the base. ``StrictRuleMerger`` detects that afterwards and
raises ``UnorderedCall``.
"""

import logging
from typing import Iterable, List, Tuple

from fab.errors import UnorderedCall
from fab.recorder import find_duplicate_names
from fab.rules import Rule

logger = logging.getLogger(__name__)


class RuleMerger:
    """Applies an overrides sequence onto a base sequence."""

    def __init__(
        self, base: Iterable[Rule], overrides: Iterable[Rule]
    ) -> None:
        merged: List[Rule] = []
        pending = list(overrides)

        for base_rule in base:
            match = next(
                (
                    index
                    for index, override in enumerate(pending)
                    if override.name == base_rule.name
                ),
                None,
            )
            if match is None:
                merged.append(base_rule)
                continue

            merged.extend(pending[:match])
            merged.append(self.merge_rule(base_rule, pending[match]))
            pending = pending[match + 1 :]

        merged.extend(pending)
        self._rules: Tuple[Rule, ...] = tuple(merged)

        logger.debug(
            "Rule sequences merged",
            extra={"merged_names": [rule.name for rule in self._rules]},
        )

    def merge_rule(self, base_rule: Rule, override_rule: Rule) -> Rule:
        return override_rule

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules


class StrictRuleMerger(RuleMerger):
    """
    Merger that rejects merged sequences containing a name more than once.

    Raises:
        UnorderedCall: If the overrides were ordered inconsistently with the
            base sequence
    """

    def __init__(
        self, base: Iterable[Rule], overrides: Iterable[Rule]
    ) -> None:
        super().__init__(base, overrides)
        duplicates = find_duplicate_names(self.rules)
        if duplicates:
            logger.error(
                "Merged rule sequence is not name-unique",
                extra={"duplicate_names": duplicates},
            )
            raise UnorderedCall(duplicates)


def merge_rules(
    base: Iterable[Rule], overrides: Iterable[Rule], strict: bool = True
) -> Tuple[Rule, ...]:
    """Merge two rule sequences, strictly unless told otherwise"""
    merger_class = StrictRuleMerger if strict else RuleMerger
    return merger_class(base, overrides).rules
