import logging
import os
from typing import Any, List, Optional

import httpx
from dotenv import load_dotenv

from logic.errors import CreateFailure, ListLoadFailure
from model.models import Case, Draft

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0


class CaseService:
    """
    Async HTTP client for the case-management service.

    GET  /cases  -> list of case documents
    POST /cases  -> created case document (with _id, case_number, date_reported)

    Any transport error, non-2xx response or undecodable body is raised as
    ListLoadFailure / CreateFailure.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or os.getenv("CASE_SERVICE_URL", DEFAULT_SERVICE_URL)).rstrip("/")
        self.timeout = timeout if timeout is not None else float(
            os.getenv("CASE_SERVICE_TIMEOUT", DEFAULT_TIMEOUT)
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "CaseService":
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def list_cases(self) -> List[Case]:
        try:
            response = await self._client.get("/cases")
            response.raise_for_status()
            docs = response.json()
            if not isinstance(docs, list):
                raise ValueError(f"Expected a JSON array, got {type(docs).__name__}")
            cases = [Case.from_dict(doc) for doc in docs]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise ListLoadFailure("list_cases", "Could not fetch case list", cause=e) from e
        logger.info("Fetched %d cases from %s", len(cases), self.base_url)
        return cases

    async def create_case(self, draft: Draft) -> Case:
        try:
            response = await self._client.post("/cases", json=draft.to_payload())
            response.raise_for_status()
            case = Case.from_dict(self._expect_object(response.json()))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise CreateFailure("create_case", "Could not create case", cause=e) from e
        logger.info("Created case %s (%s)", case.id, case.case_number or "no number")
        return case

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _expect_object(doc: Any) -> dict:
        if not isinstance(doc, dict):
            raise ValueError(f"Expected a JSON object, got {type(doc).__name__}")
        return doc
