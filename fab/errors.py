"""
Errors raised while recording, merging and applying factory rules.

All of them are usage errors: they abort the current ``create`` call and are
never recovered internally. Callers are expected to fix their declarative
blocks.
"""

from typing import List


class FabError(Exception):
    """Base class for all factory usage errors"""

    pass


class InvalidRule(FabError):
    """Raised when a rule is declared with an unusable name or producer"""

    def __init__(
        self,
        name: str,
        reason: str = "",
        problem: str = "definition block must accept zero or one argument",
    ) -> None:
        self.name = name
        message = f"{problem} (rule '{name}')"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DuplicateRule(FabError):
    """Raised when one declarative block declares a rule name twice"""

    def __init__(self, names: List[str]) -> None:
        self.names = list(names)
        super().__init__(f"duplicate call of {', '.join(self.names)}")


class UnorderedCall(FabError):
    """Raised when overrides are ordered inconsistently with their base"""

    def __init__(self, names: List[str]) -> None:
        self.names = list(names)
        super().__init__(f"unordered call of {', '.join(self.names)}")


class UnknownAttribute(FabError):
    """Raised when the target instance does not expose a field"""

    def __init__(self, target: str, name: str) -> None:
        self.target = target
        self.name = name
        super().__init__(f"{target} has no settable attribute '{name}'")
