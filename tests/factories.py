import asyncio
from typing import List, Optional

from model.models import Case, Draft


def case_doc(n: int, **overrides) -> dict:
    """Case document shaped like the service's JSON."""
    doc = {
        "_id": f"case-{n}",
        "case_number": f"CASE-{n:03d}",
        "title": f"Case {n}",
        "description": f"Description {n}",
        "violation_types": ["assault"],
        "status": "NEW",
        "priority": "MEDIUM",
        "location": {"country": "Germany", "region": "Bavaria", "city": "Munich"},
        "date_occurred": "2025-10-01T10:00:00",
        "date_reported": "2025-10-02T09:00:00",
        "perpetrators": [],
        "evidence": [],
    }
    doc.update(overrides)
    return doc


class GatedBackend:
    """
    Fake case service. When ``gate`` is set to an asyncio.Event, every call
    blocks until the test sets it.
    """

    def __init__(self, cases: Optional[List[Case]] = None):
        self.cases = list(cases or [])
        self.gate: Optional[asyncio.Event] = None
        self.list_error: Optional[Exception] = None
        self.create_error: Optional[Exception] = None
        self.drafts: List[Draft] = []
        self.created: List[Case] = []
        self.list_calls = 0

    async def _wait(self):
        if self.gate is not None:
            await self.gate.wait()

    async def list_cases(self):
        self.list_calls += 1
        await self._wait()
        if self.list_error:
            raise self.list_error
        return list(self.cases)

    async def create_case(self, draft: Draft) -> Case:
        self.drafts.append(draft)
        await self._wait()
        if self.create_error:
            raise self.create_error
        n = 100 + len(self.drafts)
        doc = case_doc(n, **draft.to_payload())
        doc["date_reported"] = "2025-10-05T12:00:00"
        case = Case.from_dict(doc)
        self.created.append(case)
        return case
