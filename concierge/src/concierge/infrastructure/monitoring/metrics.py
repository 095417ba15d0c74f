"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "concierge_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "concierge_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "concierge_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Database Metrics
# ============================================================

database_connect_failures_total = Counter(
    "concierge_database_connect_failures_total",
    "Database connection attempts that failed at startup",
)

# ============================================================
# Lifecycle Metrics
# ============================================================

shutdown_step_duration_seconds = Histogram(
    "concierge_shutdown_step_duration_seconds",
    "Duration of each graceful shutdown step in seconds",
    ["step"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

shutdown_failures_total = Counter(
    "concierge_shutdown_failures_total",
    "Graceful shutdown steps that failed",
    ["step"],
)
