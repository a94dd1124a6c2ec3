"""Tests for registration and dashboard UI helpers."""
from src.ui.admin_dashboard import registration_rows
from src.ui.html_utils import field_feedback_html, html_block, stat_card_html, type_badge_html
from src.ui.registration_page import visible_fields


class TestRegistrationRows:
    """Tests for flattening API records into table rows."""

    def test_professional_row(self):
        """Company and phone are shown when present."""
        rows = registration_rows([{
            "name": "Bo",
            "email": "bo@x.com",
            "registration_type": "professional",
            "company": "Acme",
            "phone": "0912",
            "created_at": "2025-10-28T14:00:00+08:00",
        }])

        assert rows[0]["Name"] == "Bo"
        assert rows[0]["Type"] == "Professional"
        assert rows[0]["Company"] == "Acme"
        assert rows[0]["Phone"] == "0912"
        assert rows[0]["Registered"]

    def test_missing_optional_fields_use_dash(self):
        """Absent company/phone render as a dash."""
        rows = registration_rows([{
            "name": "Al",
            "email": "a@b.com",
            "registration_type": "student",
            "created_at": "2025-10-28T14:00:00+08:00",
        }])

        assert rows[0]["Company"] == "—"
        assert rows[0]["Phone"] == "—"

    def test_unparseable_timestamp_is_shown_raw(self):
        """Bad timestamps are displayed as-is."""
        rows = registration_rows([{"name": "Al", "registration_type": "student", "created_at": "yesterday"}])

        assert rows[0]["Registered"] == "yesterday"

    def test_empty_list(self):
        """No records, no rows."""
        assert registration_rows([]) == []


class TestHtmlHelpers:
    """Tests for HTML snippets."""

    def test_html_block_strips_indentation(self):
        """Indented lines must not become Markdown code blocks."""
        html = html_block("""
            <div>
                <span>x</span>
            </div>
        """)

        assert all(not line.startswith(" ") for line in html.splitlines())

    def test_field_feedback_error(self):
        """Error feedback carries the escaped message."""
        html = field_feedback_html("error", "Invalid <email>")

        assert "field-error" in html
        assert "Invalid &lt;email&gt;" in html

    def test_field_feedback_valid(self):
        """Valid feedback shows a check mark."""
        assert "field-valid" in field_feedback_html("valid")

    def test_field_feedback_none(self):
        """No status, no markup."""
        assert field_feedback_html(None) == ""

    def test_stat_card(self):
        """Stat card shows value and label."""
        html = stat_card_html("Students", 7, "#6366f1")

        assert "7" in html
        assert "Students" in html

    def test_type_badge(self):
        """Known types get their label; unknown types are escaped."""
        assert "Student" in type_badge_html("student")
        assert "&lt;b&gt;" in type_badge_html("<b>")


class TestVisibleFields:
    """Tests for conditional form fields."""

    def test_student_fields(self):
        """Students never see the company field."""
        assert visible_fields("student") == ["name", "email", "phone"]

    def test_professional_fields(self):
        """Professionals see the company field."""
        assert visible_fields("professional") == ["name", "email", "company", "phone"]

    def test_no_type_selected(self):
        """Without a type the company field stays hidden."""
        assert "company" not in visible_fields(None)
