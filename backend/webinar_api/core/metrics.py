"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at the /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

webinar_operations = Counter(
    'webinar_operations_total',
    'Webinar use case invocations',
    ['operation', 'result']  # organize/change_seats, success/not_found/unauthorized/validation/error
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_webinar_operation(operation: str, result: str):
    """Record a use case outcome."""
    webinar_operations.labels(operation=operation, result=result).inc()
