import os
from typing import Optional

from backend_mock import MockCaseService
from logic.case_service import CaseService


def use_mock_backend() -> bool:
    return os.getenv("CASE_SERVICE_MOCK", "").strip().lower() in ("1", "true", "yes")


def make_backend(mock: Optional[bool] = None, latency: float = 0.5):
    """HTTP client for the case service, or the in-memory mock when asked for."""
    if mock is None:
        mock = use_mock_backend()
    if mock:
        return MockCaseService(latency=latency)
    return CaseService()
