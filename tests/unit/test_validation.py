"""Unit tests for validation utilities."""
import pytest
from src.utils.validation import (
    FIELD_RULES,
    COMPANY_REQUIRED,
    INVALID_EMAIL,
    INVALID_PHONE,
    NAME_TOO_SHORT,
    is_valid_registration_type,
    normalize_email,
    normalize_text,
    validate_company,
    validate_email,
    validate_field,
    validate_name,
    validate_phone,
)


class TestValidateName:
    """Test name validation."""

    def test_valid_name(self):
        """Test two characters is enough."""
        assert validate_name("Al") == (True, "")

    def test_single_character_rejected(self):
        """Test single character name is too short."""
        assert validate_name("A") == (False, NAME_TOO_SHORT)

    def test_whitespace_is_trimmed_before_length_check(self):
        """Test surrounding whitespace does not count."""
        assert validate_name("  A  ") == (False, NAME_TOO_SHORT)

    def test_empty_name_rejected(self):
        """Test empty name is rejected."""
        is_valid, error = validate_name("")
        assert is_valid is False
        assert error == "Name must be at least 2 characters"


class TestValidateEmail:
    """Test email shape validation."""

    @pytest.mark.parametrize("email", ["a@b.com", "first.last@example.co.uk", "x+tag@domain.io"])
    def test_valid_emails(self, email):
        """Test common email shapes are accepted."""
        assert validate_email(email) == (True, "")

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "@b.com", "a b@c.com", "a@b .com", ""])
    def test_invalid_emails(self, email):
        """Test malformed emails are rejected."""
        assert validate_email(email) == (False, INVALID_EMAIL)


class TestValidateCompany:
    """Test conditional company validation."""

    def test_company_ignored_for_students(self):
        """Test students never need a company."""
        assert validate_company("", "student") == (True, "")

    def test_company_ignored_without_type(self):
        """Test company is not required before a type is chosen."""
        assert validate_company("", None) == (True, "")

    def test_professional_requires_company(self):
        """Test empty company fails for professionals."""
        assert validate_company("", "professional") == (False, COMPANY_REQUIRED)

    def test_professional_company_too_short(self):
        """Test one-character company fails for professionals."""
        assert validate_company(" X ", "professional") == (False, COMPANY_REQUIRED)

    def test_professional_with_company(self):
        """Test valid company passes for professionals."""
        assert validate_company("Acme", "professional") == (True, "")


class TestValidatePhone:
    """Test optional phone validation."""

    def test_empty_phone_is_valid(self):
        """Test phone is optional."""
        assert validate_phone("") == (True, "")

    @pytest.mark.parametrize("phone", ["+1 (555) 010-0000", "0912345678", "02-2345 6789"])
    def test_valid_phones(self, phone):
        """Test permissive phone characters are accepted."""
        assert validate_phone(phone) == (True, "")

    @pytest.mark.parametrize("phone", ["call me", "555-CALL", "12#34", "1+2"])
    def test_invalid_phones(self, phone):
        """Test letters and symbols are rejected."""
        assert validate_phone(phone) == (False, INVALID_PHONE)


class TestValidateField:
    """Test the field rule table."""

    def test_rule_table_covers_form_fields(self):
        """Test every form field has a rule."""
        assert set(FIELD_RULES) == {"name", "email", "company", "phone"}

    def test_dispatches_to_rule(self):
        """Test validate_field uses the matching rule."""
        assert validate_field("email", "not-an-email") == (False, INVALID_EMAIL)

    def test_passes_registration_type(self):
        """Test registration type reaches the company rule."""
        assert validate_field("company", "", "professional") == (False, COMPANY_REQUIRED)
        assert validate_field("company", "", "student") == (True, "")

    def test_none_value_treated_as_empty(self):
        """Test None is validated as empty string."""
        assert validate_field("name", None) == (False, NAME_TOO_SHORT)

    def test_unknown_field_is_valid(self):
        """Test fields without a rule always pass."""
        assert validate_field("nickname", "") == (True, "")


class TestNormalization:
    """Test normalization helpers."""

    def test_registration_types(self):
        """Test only student and professional are accepted."""
        assert is_valid_registration_type("student") is True
        assert is_valid_registration_type("professional") is True
        assert is_valid_registration_type("Student") is False
        assert is_valid_registration_type(None) is False

    def test_normalize_email(self):
        """Test email is trimmed and lower-cased."""
        assert normalize_email("  Al@Example.COM ") == "al@example.com"

    def test_normalize_text_handles_none(self):
        """Test None normalizes to empty string."""
        assert normalize_text(None) == ""
        assert normalize_text("  Bo  ") == "Bo"
