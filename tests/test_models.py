from dataclasses import replace

import pytest

from model.models import Case, CasePriority, CaseStatus, Draft, Location, Perpetrator, empty_draft
from tests.factories import case_doc


class TestCaseFromDict:
    def test_underscore_id(self):
        case = Case.from_dict(case_doc(1))
        assert case.id == "case-1"
        assert case.case_number == "CASE-001"
        assert case.status is CaseStatus.NEW
        assert case.priority is CasePriority.MEDIUM
        assert case.location == Location("Germany", "Bavaria", "Munich")

    def test_plain_id_and_optional_fields(self):
        doc = case_doc(2)
        del doc["_id"]
        del doc["case_number"]
        del doc["perpetrators"]
        del doc["evidence"]
        doc["id"] = 42
        case = Case.from_dict(doc)
        assert case.id == "42"
        assert case.case_number is None
        assert case.perpetrators == ()
        assert case.evidence == ()

    def test_nested_lists(self):
        doc = case_doc(
            3,
            perpetrators=[{"name": "X", "type": "group"}],
            evidence=[{"type": "photo", "url": "https://example.org/p.jpg"}],
        )
        case = Case.from_dict(doc)
        assert case.perpetrators[0] == Perpetrator("X", "group")
        assert case.evidence[0].url == "https://example.org/p.jpg"
        assert case.evidence[0].description is None

    def test_missing_id(self):
        doc = case_doc(4)
        del doc["_id"]
        with pytest.raises(KeyError):
            Case.from_dict(doc)

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            Case.from_dict(case_doc(5, status="ARCHIVED"))

    def test_string_violation_types_rejected(self):
        with pytest.raises(ValueError):
            Case.from_dict(case_doc(6, violation_types="assault"))

    def test_non_object_document_rejected(self):
        with pytest.raises(ValueError):
            Case.from_dict(None)

    def test_non_object_location_rejected(self):
        with pytest.raises(ValueError):
            Case.from_dict(case_doc(7, location="Berlin"))

    def test_null_nested_lists_are_empty(self):
        case = Case.from_dict(case_doc(8, perpetrators=None, evidence=None))
        assert case.perpetrators == ()
        assert case.evidence == ()


class TestDraft:
    def test_empty_template(self):
        draft = empty_draft()
        assert draft.status is CaseStatus.NEW
        assert draft.priority is CasePriority.MEDIUM
        assert draft.location == Location("", "", "")
        assert draft.perpetrators == ()

    def test_missing_fields_on_empty(self):
        assert empty_draft().missing_fields() == (
            "title", "description", "violation_types", "location.country", "date_occurred",
        )

    def test_complete_draft_has_nothing_missing(self, complete_draft):
        assert complete_draft.missing_fields() == ()

    def test_blank_violation_segments_count_as_missing(self, complete_draft):
        draft = replace(complete_draft, violation_types=("", " "))
        assert draft.missing_fields() == ("violation_types",)

    def test_payload(self, complete_draft):
        draft = Draft(
            title=complete_draft.title,
            description=complete_draft.description,
            violation_types=("a", "b"),
            location=complete_draft.location,
            date_occurred=complete_draft.date_occurred,
            perpetrators=(Perpetrator("P", "individual"),),
        )
        assert draft.to_payload() == {
            "title": "Harassment at work",
            "description": "Repeated verbal harassment by a supervisor.",
            "violation_types": ["a", "b"],
            "status": "NEW",
            "priority": "MEDIUM",
            "location": {"country": "France", "region": "", "city": "Lyon"},
            "date_occurred": "2025-10-04T08:30",
            "perpetrators": [{"name": "P", "type": "individual"}],
        }
