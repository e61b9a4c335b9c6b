"""Design rule registry.

The registry holds two independent namespaces: collection rules, which judge
a single FeatureCollection, and split rules, which judge an ordered pair of
collections (dependent, reference). A rule kind lives in at most one
namespace.

The registry is built once during process setup, frozen, and then shared
read-only by every validation call. Misconfiguration (a duplicate kind, or a
registration after freezing) raises immediately so that the process fails to
start instead of failing requests.
"""

import logging
from collections.abc import Callable

from texel.models.enums import RuleKind
from texel.models.geometry import FeatureCollection
from texel.rules.errors import DuplicateRuleError, RegistryFrozenError

logger = logging.getLogger(__name__)

CollectionPredicate = Callable[[FeatureCollection], bool]
SplitPredicate = Callable[[FeatureCollection, FeatureCollection], bool]

COLLECTION_NAMESPACE = "collection"
SPLIT_NAMESPACE = "split"


class RuleRegistry:
    """Registry of design rule predicates keyed by RuleKind.

    Iteration order is registration order, which makes the order of reported
    violations deterministic.

    Example:
        registry = RuleRegistry()
        registry.register_collection_rule(RuleKind.NOT_POLYGON, check_polygons_only)
        registry.register_split_rule(RuleKind.OUT_OF_BOUND, check_within_bounds)
        registry.freeze()
    """

    def __init__(self):
        self._collection_rules: dict[RuleKind, CollectionPredicate] = {}
        self._split_rules: dict[RuleKind, SplitPredicate] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register_collection_rule(self, kind: RuleKind, predicate: CollectionPredicate) -> None:
        """Register a rule over a single FeatureCollection.

        Raises:
            DuplicateRuleError: If ``kind`` is already registered in either namespace
            RegistryFrozenError: If the registry has been frozen
        """
        self._register(kind)
        self._collection_rules[kind] = predicate
        logger.debug(f"Registered {COLLECTION_NAMESPACE} rule {kind}")

    def register_split_rule(self, kind: RuleKind, predicate: SplitPredicate) -> None:
        """Register a rule over an ordered (dependent, reference) pair of collections.

        Raises:
            DuplicateRuleError: If ``kind`` is already registered in either namespace
            RegistryFrozenError: If the registry has been frozen
        """
        self._register(kind)
        self._split_rules[kind] = predicate
        logger.debug(f"Registered {SPLIT_NAMESPACE} rule {kind}")

    def _register(self, kind: RuleKind) -> None:
        if self._frozen:
            raise RegistryFrozenError(kind)
        if kind in self._collection_rules:
            raise DuplicateRuleError(kind, COLLECTION_NAMESPACE)
        if kind in self._split_rules:
            raise DuplicateRuleError(kind, SPLIT_NAMESPACE)

    def freeze(self) -> "RuleRegistry":
        """Close the registry for registration. Returns the registry for chaining."""
        self._frozen = True
        logger.info(
            f"Design rule registry frozen with {len(self._collection_rules)} collection "
            f"and {len(self._split_rules)} split rules"
        )
        return self

    def collection_rules(self) -> list[tuple[RuleKind, CollectionPredicate]]:
        return list(self._collection_rules.items())

    def split_rules(self) -> list[tuple[RuleKind, SplitPredicate]]:
        return list(self._split_rules.items())

    def kinds(self) -> list[RuleKind]:
        """All registered kinds, collection rules first."""
        return [*self._collection_rules, *self._split_rules]

    def __contains__(self, kind: object) -> bool:
        return kind in self._collection_rules or kind in self._split_rules

    def __len__(self) -> int:
        return len(self._collection_rules) + len(self._split_rules)
