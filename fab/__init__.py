"""
fab: declarative factories for test fixture instances.

Factories declare ordered attribute rules, may inherit and override a parent
factory's rules, and accept per-call overrides::

    from fab import Factory

    dog_fab = Factory(Dog, lambda r: r.declare("name", lambda: "rex"))
    puppy = dog_fab.create(lambda r: r.declare("age", lambda: 1))
"""

from fab.errors import (
    DuplicateRule,
    FabError,
    InvalidRule,
    UnknownAttribute,
    UnorderedCall,
)
from fab.factory import AttributeCollector, Factory, assign_attributes
from fab.merge import RuleMerger, StrictRuleMerger, merge_rules
from fab.recorder import RuleRecorder, RuleSequence, find_duplicate_names
from fab.rules import Rule, producer_arity

__all__ = [
    "AttributeCollector",
    "DuplicateRule",
    "FabError",
    "Factory",
    "InvalidRule",
    "Rule",
    "RuleMerger",
    "RuleRecorder",
    "RuleSequence",
    "StrictRuleMerger",
    "UnknownAttribute",
    "UnorderedCall",
    "assign_attributes",
    "find_duplicate_names",
    "merge_rules",
    "producer_arity",
]
