"""Rule registry error definitions.

These are configuration errors raised while the registry is being built at
startup. Design rule violations are validation outcomes, not exceptions.
"""

from texel.models.enums import RuleKind


class RuleRegistryError(Exception):
    """Base class for rule registry misconfiguration."""


class DuplicateRuleError(RuleRegistryError):
    """A rule kind was registered more than once."""

    def __init__(self, kind: RuleKind, namespace: str):
        self.kind = kind
        self.namespace = namespace
        super().__init__(f"Design rule {kind} is already registered as a {namespace} rule")


class RegistryFrozenError(RuleRegistryError):
    """A rule was registered after the registry was frozen."""

    def __init__(self, kind: RuleKind):
        self.kind = kind
        super().__init__(f"Cannot register design rule {kind}: registry is frozen")
