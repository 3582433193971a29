"""Text helpers shared by the cases table and the detail dialog."""
import os
from datetime import datetime
from typing import Optional, Tuple

from model.models import Case, CasePriority, CaseStatus

# badge colours (foreground on dark background)
STATUS_COLORS = {
    CaseStatus.NEW: "#0ea5e9",
    CaseStatus.UNDER_INVESTIGATION: "#22d3ee",
    CaseStatus.PENDING: "#f59e0b",
    CaseStatus.CLOSED: "#94a3b8",
    CaseStatus.RESOLVED: "#22c55e",
}
PRIORITY_COLORS = {
    CasePriority.LOW: "#22c55e",
    CasePriority.MEDIUM: "#f59e0b",
    CasePriority.HIGH: "#ef4444",
    CasePriority.URGENT: "#e5e7eb",
}
FALLBACK_COLOR = "#94a3b8"


def display_id(case: Case) -> str:
    return case.case_number or case.id


def status_label(status: CaseStatus) -> str:
    return status.value.replace("_", " ")


def format_date(value: str) -> str:
    """ISO timestamp -> 'Oct 03, 2025'. Unparseable input is returned as-is."""
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%b %d, %Y")
    except ValueError:
        return value


def short_location(case: Case) -> str:
    return f"{case.location.city or ''}, {case.location.country}"


def full_location(case: Case) -> str:
    loc = case.location
    return f"{loc.city or ''}, {loc.region or ''}, {loc.country}"


def case_row(case: Case) -> Tuple[str, str, str, str, str, str]:
    return (
        display_id(case),
        case.title,
        status_label(case.status),
        case.priority.value,
        format_date(case.date_reported),
        short_location(case),
    )


def edit_url(case: Case, base_url: Optional[str] = None) -> str:
    base = base_url or os.getenv("CASE_EDIT_BASE_URL") or os.getenv(
        "CASE_SERVICE_URL", "http://localhost:8000"
    )
    return f"{base.rstrip('/')}/cases/{case.id}/edit"
