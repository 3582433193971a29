import asyncio
import random
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from logic.errors import CreateFailure, ListLoadFailure
from model.models import Case, CasePriority, CaseStatus, Draft, EvidenceItem, Location, Perpetrator


def get_initial_cases() -> List[Case]:
    return [
        Case(
            id="65f1c0a1e4b0a1b2c3d4e5f6",
            case_number="CASE-001",
            title="Assault outside community centre",
            description="Two witnesses report a verbal attack escalating to assault.",
            violation_types=("assault", "hate_crime"),
            status=CaseStatus.UNDER_INVESTIGATION,
            priority=CasePriority.HIGH,
            location=Location(country="Germany", region="Berlin", city="Berlin"),
            date_occurred="2025-10-01T21:30:00",
            date_reported="2025-10-02T09:12:00",
            perpetrators=(Perpetrator("Unknown male", "individual", "Approx. 30 years old"),),
            evidence=(EvidenceItem("video", "https://example.org/evidence/1.mp4", "Phone recording"),),
        ),
        Case(
            id="65f1c0a1e4b0a1b2c3d4e5f7",
            case_number="CASE-002",
            title="Housing discrimination",
            description="Tenant application refused with discriminatory remarks.",
            violation_types=("discrimination",),
            status=CaseStatus.NEW,
            priority=CasePriority.MEDIUM,
            location=Location(country="Austria", city="Vienna"),
            date_occurred="2025-10-03T14:00:00",
            date_reported="2025-10-03T16:45:00",
        ),
    ]


class MockCaseService:
    """
    In-memory stand-in for the case service (CASE_SERVICE_MOCK=1).

    ``latency`` simulates network delay in seconds; ``fail_list`` /
    ``fail_create`` make the next calls raise the matching service error.
    """

    def __init__(self, cases: Optional[List[Case]] = None, latency: float = 0.0):
        self._cases = list(get_initial_cases() if cases is None else cases)
        self.latency = latency
        self.fail_list = False
        self.fail_create = False

    async def _delay(self):
        if self.latency:
            # jitter so the UI spinner is visible
            await asyncio.sleep(self.latency * random.uniform(0.8, 1.2))

    def _next_number(self) -> str:
        maxnum = 0
        for c in self._cases:
            try:
                maxnum = max(maxnum, int(str(c.case_number).split("-")[-1]))
            except ValueError:
                pass
        return f"CASE-{maxnum + 1:03d}"

    async def list_cases(self) -> List[Case]:
        await self._delay()
        if self.fail_list:
            raise ListLoadFailure("list_cases", "Mock service configured to fail")
        return list(self._cases)

    async def create_case(self, draft: Draft) -> Case:
        await self._delay()
        if self.fail_create:
            raise CreateFailure("create_case", "Mock service configured to fail")
        case = Case(
            id=uuid.uuid4().hex[:24],
            case_number=self._next_number(),
            title=draft.title,
            description=draft.description,
            violation_types=draft.violation_types,
            status=draft.status,
            priority=draft.priority,
            location=draft.location,
            date_occurred=draft.date_occurred,
            date_reported=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            perpetrators=draft.perpetrators,
        )
        self._cases.append(case)
        return case

    async def aclose(self):
        pass
