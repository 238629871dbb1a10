"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "serrurier_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "serrurier_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "serrurier_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Identity Store Metrics
# ============================================================

identity_store_requests_total = Counter(
    "serrurier_identity_store_requests_total",
    "Total identity store requests",
    ["operation", "status"],
)

identity_store_request_duration_seconds = Histogram(
    "serrurier_identity_store_request_duration_seconds",
    "Identity store request duration in seconds",
    ["operation"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# ============================================================
# Business Metrics
# ============================================================

signature_verifications_total = Counter(
    "serrurier_signature_verifications_total",
    "Wallet signature verifications",
    ["result"],
)

binding_outcomes_total = Counter(
    "serrurier_binding_outcomes_total",
    "Wallet binding decisions",
    ["component", "outcome"],
)
