"""
Unit tests for log sanitization utilities.
"""

import pytest
from google_drive_provisioner.utils.log_sanitizer import (
    sanitize_email,
    sanitize_name,
    sanitize_query,
    sanitize_resource_id,
    sanitize_for_logging
)


@pytest.mark.unit
class TestNameSanitization:
    """Test resource name sanitization."""

    def test_short_name(self):
        assert sanitize_name("Team A") == "'Team A' (6 chars)"

    def test_long_name_is_truncated(self):
        result = sanitize_name("Incident at checkout service for customer ACME")
        assert result.startswith("'Incident at checkout...'")
        assert "ACME" not in result

    def test_empty_name(self):
        assert sanitize_name("") == "[empty-name]"
        assert sanitize_name(None) == "[empty-name]"


@pytest.mark.unit
class TestQuerySanitization:
    """Test Drive query sanitization."""

    def test_name_value_is_hidden(self):
        result = sanitize_query("trashed = false and name = 'Secret Customer'")
        assert "Secret Customer" not in result
        assert "[NAME]" in result

    def test_escaped_quote_in_name(self):
        result = sanitize_query("name = 'Bob\\'s outage'")
        assert "Bob" not in result

    def test_email_is_hidden(self):
        result = sanitize_query("'user@example.com' in owners")
        assert "user@example.com" not in result
        assert "[EMAIL]" in result

    def test_empty_query(self):
        assert sanitize_query("") == "[empty-query]"


@pytest.mark.unit
class TestIdSanitization:
    """Test identifier sanitization."""

    def test_short_id(self):
        assert sanitize_resource_id("D42") == "[id: D42]"

    def test_long_id(self):
        result = sanitize_resource_id("1AbCdEfGhIjKlMnOpQrStUvWxYz")
        assert result == "[id: 1AbCdEfG...WxYz]"

    def test_missing_id(self):
        assert sanitize_resource_id("") == "[no-id]"


@pytest.mark.unit
class TestSanitizeForLogging:
    """Test the combined sanitizer."""

    def test_fields_are_routed_by_key(self):
        result = sanitize_for_logging(
            name="Team A",
            parent_id="1AbCdEfGhIjKlMnOpQrStUvWxYz",
            query="name = 'Team A'",
            email="bot@example.com",
            max_results=10
        )

        assert result['name'] == "'Team A' (6 chars)"
        assert result['parent_id'] == "[id: 1AbCdEfG...WxYz]"
        assert "[NAME]" in result['query']
        assert result['email'] == sanitize_email("bot@example.com")
        assert result['max_results'] == 10

    def test_suffixed_names(self):
        result = sanitize_for_logging(team_name="Team A")
        assert result['team_name'] == "'Team A' (6 chars)"

    def test_missing_id(self):
        assert sanitize_for_logging(file_id=None)['file_id'] is None
