from typing import List

import pytest

from logic.controllers import FetchController, SubmissionController
from logic.store import DataStore
from logic.view_state import ViewSelector
from model.models import Case, Draft, Location
from tests.factories import GatedBackend, case_doc


@pytest.fixture
def sample_cases() -> List[Case]:
    return [Case.from_dict(case_doc(n)) for n in (1, 2, 3)]


@pytest.fixture
def complete_draft() -> Draft:
    return Draft(
        title="Harassment at work",
        description="Repeated verbal harassment by a supervisor.",
        violation_types=("harassment",),
        location=Location(country="France", city="Lyon"),
        date_occurred="2025-10-04T08:30",
    )


@pytest.fixture
def backend() -> GatedBackend:
    return GatedBackend()


@pytest.fixture
def store() -> DataStore:
    return DataStore()


@pytest.fixture
def view() -> ViewSelector:
    return ViewSelector()


@pytest.fixture
def fetcher(backend, store) -> FetchController:
    return FetchController(backend, store)


@pytest.fixture
def creation(backend, store, view) -> SubmissionController:
    return SubmissionController(backend, store, view)
