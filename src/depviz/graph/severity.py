"""
Metric severity resolution.

Maps the alerts of a file or symbol audit entry onto a fixed vector with one
severity per metric, 0 meaning "no alert".
"""

from typing import Dict

from ..core.types import FileAudit, Metric, SymbolAudit

SeverityVector = Dict[Metric, int]


def empty_severity() -> SeverityVector:
    return {metric: 0 for metric in Metric}


def resolve_severity(audit: FileAudit | SymbolAudit | None) -> SeverityVector:
    """
    Build the severity vector for a node.

    Args:
        audit: The node's audit entry, or None for nodes without audit data
            (external symbols, files missing from the audit manifest).

    Returns:
        All seven metrics, each at the alert's severity or 0.
    """
    severity = empty_severity()
    if audit is None:
        return severity

    for metric_name, alert in audit.alerts.items():
        try:
            metric = Metric(metric_name)
        except ValueError:
            # Alerts on metrics we do not chart
            continue
        severity[metric] = alert.severity

    return severity
