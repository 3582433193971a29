from dataclasses import replace

from logic import presenters
from model.models import CaseStatus, Location


class TestPresenters:
    def test_display_id_prefers_case_number(self, sample_cases):
        case = sample_cases[0]
        assert presenters.display_id(case) == "CASE-001"
        assert presenters.display_id(replace(case, case_number=None)) == "case-1"

    def test_status_label(self):
        assert presenters.status_label(CaseStatus.UNDER_INVESTIGATION) == "UNDER INVESTIGATION"
        assert presenters.status_label(CaseStatus.NEW) == "NEW"

    def test_format_date(self):
        assert presenters.format_date("2025-10-02T09:12:00") == "Oct 02, 2025"
        assert presenters.format_date("2025-10-02T09:12:00Z") == "Oct 02, 2025"
        assert presenters.format_date("yesterday") == "yesterday"
        assert presenters.format_date("") == ""

    def test_locations(self, sample_cases):
        case = replace(sample_cases[0], location=Location(country="Germany"))
        assert presenters.short_location(case) == ", Germany"
        assert presenters.full_location(sample_cases[0]) == "Munich, Bavaria, Germany"

    def test_case_row(self, sample_cases):
        assert presenters.case_row(sample_cases[1]) == (
            "CASE-002", "Case 2", "NEW", "MEDIUM", "Oct 02, 2025", "Munich, Germany",
        )

    def test_every_status_has_a_colour(self):
        assert set(presenters.STATUS_COLORS) == set(CaseStatus)

    def test_edit_url(self, sample_cases, monkeypatch):
        case = sample_cases[0]
        assert presenters.edit_url(case, "http://ui.test/") == "http://ui.test/cases/case-1/edit"
        monkeypatch.setenv("CASE_EDIT_BASE_URL", "http://edit.test")
        assert presenters.edit_url(case) == "http://edit.test/cases/case-1/edit"
