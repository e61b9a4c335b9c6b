"""Design Rule Engine: runs the registered rules against submitted geometry."""

import logging

from texel.models.enums import RuleKind
from texel.models.geometry import FeatureCollection
from texel.rules.errors import RuleRegistryError
from texel.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)


class DesignRuleEngine:
    """Validates feature collections against a frozen rule registry.

    The engine holds no mutable state. One instance is created at startup and
    shared by all requests.

    Attributes:
        registry: Frozen registry of collection and split rules
    """

    def __init__(self, registry: RuleRegistry):
        """Initialize the engine.

        Args:
            registry: Fully built rule registry

        Raises:
            RuleRegistryError: If the registry has not been frozen yet
        """
        if not registry.frozen:
            msg = "Design rule registry must be frozen before it is used for validation"
            raise RuleRegistryError(msg)
        self.registry = registry

    def validate_collection(self, collection: FeatureCollection) -> tuple[bool, list[RuleKind]]:
        """Run every collection rule against ``collection``.

        Args:
            collection: Parsed feature collection

        Returns:
            (ok, violations): ``ok`` is True when no rule failed; ``violations``
            lists each failing rule kind once, in registry order
        """
        violations = [
            kind
            for kind, predicate in self.registry.collection_rules()
            if not predicate(collection)
        ]

        if violations:
            logger.info(
                f"Collection of {len(collection)} features violates design rules: "
                f"{', '.join(violations)}"
            )
        return not violations, violations

    def validate_splits(
        self,
        dependent: FeatureCollection,
        reference: FeatureCollection,
    ) -> tuple[bool, list[RuleKind]]:
        """Run every split rule against an ordered pair of collections.

        Args:
            dependent: Collection that must stay consistent with ``reference``
                (e.g. height plateaus)
            reference: Complementary collection (e.g. building limits)

        Returns:
            (ok, violations) as for ``validate_collection``
        """
        violations = [
            kind
            for kind, predicate in self.registry.split_rules()
            if not predicate(dependent, reference)
        ]

        if violations:
            logger.info(
                f"Split of {len(dependent)} against {len(reference)} features violates "
                f"design rules: {', '.join(violations)}"
            )
        return not violations, violations
