"""Shared test fixtures."""

import pytest

from texel.rules import DesignRuleEngine, create_default_registry


@pytest.fixture(autouse=True)
def put_metric(mocker):
    """Keep EMF metrics from trying to reach a CloudWatch agent."""
    return mocker.patch("texel.common.metrics._put_metric")


@pytest.fixture
def design_rule_engine() -> DesignRuleEngine:
    return DesignRuleEngine(create_default_registry())
