# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "rosca_requests_total",
    "Total HTTP requests to the rosca service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "rosca_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "rosca_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_REGISTERED = Counter(
    "rosca_members_registered_total",
    "Total members registered",
    ["source"],
)
PERIOD_ADVANCES = Counter(
    "rosca_period_advances_total",
    "Total period advancements",
)
RECIPIENT_LOOKUPS = Counter(
    "rosca_recipient_lookups_total",
    "Total recipient lookups performed",
)
SCHEDULE_PROJECTIONS = Counter(
    "rosca_schedule_projections_total",
    "Total schedule projections generated",
)
NOTIFICATIONS_SENT = Counter(
    "rosca_notifications_sent_total",
    "Total recipient notifications sent",
    ["channel"],
)
ROSTER_SIZE = Gauge(
    "rosca_roster_size",
    "Number of members in the roster",
)
CURRENT_PERIOD = Gauge(
    "rosca_current_period",
    "Current rotation period",
)
