"""Prometheus metrics for syncflags."""

from prometheus_client import Counter

# Settings that get their own label value; any other name is counted as "other"
# so caller-supplied names cannot grow the series count.
KNOWN_SETTINGS: frozenset[str] = frozenset({"auto_commit", "auto_push"})
OTHER_SETTING = "other"

# Resolution metrics
FLAG_RESOLUTIONS = Counter(
    "syncflags_flag_resolutions_total",
    "Total number of flag resolutions",
    labelnames=["setting", "state", "namespace"],
)

# Store metrics
STORE_OPEN_FAILURES = Counter(
    "syncflags_store_open_failures_total",
    "Total number of config store open failures",
    labelnames=["reason"],
)


def setting_label(setting: str) -> str:
    """Map a setting name onto the bounded FLAG_RESOLUTIONS label set."""
    return setting if setting in KNOWN_SETTINGS else OTHER_SETTING
