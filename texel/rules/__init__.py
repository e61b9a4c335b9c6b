"""Design Rule Engine.

Usage:
    from texel.rules import DesignRuleEngine, create_default_registry

    engine = DesignRuleEngine(create_default_registry())

    ok, violations = engine.validate_collection(height_plateaus)
    if ok:
        ok, violations = engine.validate_splits(height_plateaus, building_limits)
"""

from texel.rules.collection import COLLECTION_RULES
from texel.rules.engine import DesignRuleEngine
from texel.rules.errors import DuplicateRuleError, RegistryFrozenError, RuleRegistryError
from texel.rules.registry import RuleRegistry
from texel.rules.splits import SPLIT_RULES


def create_default_registry() -> RuleRegistry:
    """Create a frozen registry with every built-in design rule registered once.

    Returns:
        Frozen RuleRegistry

    Raises:
        RuleRegistryError: If the built-in rule tables are misconfigured
    """
    registry = RuleRegistry()

    for kind, predicate in COLLECTION_RULES.items():
        registry.register_collection_rule(kind, predicate)

    for kind, predicate in SPLIT_RULES.items():
        registry.register_split_rule(kind, predicate)

    return registry.freeze()


__all__ = [
    "DesignRuleEngine",
    "RuleRegistry",
    "RuleRegistryError",
    "DuplicateRuleError",
    "RegistryFrozenError",
    "create_default_registry",
]
