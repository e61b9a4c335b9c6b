"""CloudWatch metrics integration via AWS Embedded Metrics Format (EMF).

Configuration via environment variables:
- AWS_EMF_ENVIRONMENT: Set to "local" to print metrics to stdout
- AWS_EMF_AGENT_ENDPOINT: CloudWatch agent endpoint (e.g., tcp://127.0.0.1:25888)
- AWS_EMF_NAMESPACE: CloudWatch namespace for metrics
"""

from logging import getLogger

from aws_embedded_metrics import metric_scope
from aws_embedded_metrics.storage_resolution import StorageResolution

from texel.models.enums import RuleKind

logger = getLogger(__name__)


@metric_scope
def _put_metric(metric_name: str, value: float, unit: str, metrics) -> None:
    """Internal function to put a metric with EMF decorator."""
    logger.debug("put metric: %s - %s - %s", metric_name, value, unit)
    metrics.put_metric(metric_name, value, unit, StorageResolution.STANDARD)


def counter(metric_name: str, value: float = 1) -> None:
    """Increment a counter metric.

    Metric failures are logged and never raised.

    Args:
        metric_name: Name of the metric
        value: Counter value to record (default: 1)
    """
    try:
        _put_metric(metric_name, value, "Count")
    except Exception as e:
        logger.error("Error calling put_metric: %s", e)


def count_violations(violations: list[RuleKind]) -> None:
    """Record one DesignRuleViolation.<kind> count per reported violation."""
    for kind in violations:
        counter(f"DesignRuleViolation.{kind}")
