# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the deployer service."""
from prometheus_client import Counter, Histogram

DEPLOYMENTS_TOTAL = Counter(
    "deployments_total",
    "Deployment requests by final outcome",
    ["status"],
)
DEPLOYMENT_FAILURES = Counter(
    "deployment_failures_total",
    "Failed deployments by pipeline stage",
    ["stage"],
)
DEPLOYMENT_DURATION = Histogram(
    "deployment_duration_seconds",
    "Time from upload to live URL",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0],
)
LIVENESS_PROBES = Counter(
    "liveness_probes_total",
    "Subdomain liveness probes",
    ["result"],
)
NAME_RESOLUTION_ATTEMPTS = Histogram(
    "name_resolution_attempts",
    "Candidates probed before a name was accepted",
    buckets=[1, 2, 3, 4, 6, 10],
)
TELEGRAM_NOTIFICATIONS = Counter(
    "telegram_notifications_total",
    "Telegram messages sent per recipient",
    ["status"],
)
ADMIN_OPERATIONS = Counter(
    "admin_operations_total",
    "Project list/delete calls against the provider",
    ["operation", "status"],
)
DEPLOY_RATE_LIMITED = Counter(
    "deploy_rate_limited_total",
    "Deploy attempts rejected by rate limiting",
    ["client_ip"],
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
