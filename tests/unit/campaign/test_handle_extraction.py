"""
Unit Tests for Resource Id Extraction

Patterns are tried most specific first; within a pattern the first
well-formed match wins.
"""

import pytest

from campaign_service.handles import build_extraction_patterns, extract_handle


pytestmark = pytest.mark.unit

H1 = "0123456789abcdef0123456789abcdef"
H2 = "fedcba9876543210fedcba9876543210"
H3 = "aaaabbbbccccddddeeeeffff00001111"


class TestExtractHandle:
    """extract_handle over discovery documents"""

    def test_full_url_form(self):
        document = f'<a href="https://crudcrud.com/api/{H1}">endpoint</a>'
        assert extract_handle(document) == H1

    def test_full_url_preferred_over_earlier_quoted_token(self):
        """Pattern priority beats position in the document"""
        document = f'<div data-id="{H2}"></div><code>https://crudcrud.com/api/{H1}</code>'
        assert extract_handle(document) == H1

    def test_path_form_when_no_full_url(self):
        document = f'<script>const endpoint = "/api/{H2}";</script>'
        assert extract_handle(document) == H2

    def test_quoted_token_fallback(self):
        document = f'<script>window.__STATE__ = {{"id": "{H3}"}};</script>'
        assert extract_handle(document) == H3

    def test_first_match_within_a_pattern(self):
        document = f"crudcrud.com/api/{H1} and crudcrud.com/api/{H2}"
        assert extract_handle(document) == H1

    def test_uppercase_hex_accepted(self):
        document = f"https://crudcrud.com/api/{H1.upper()}"
        assert extract_handle(document) == H1.upper()

    def test_short_ids_ignored(self):
        document = '<a href="https://crudcrud.com/api/abc123">x</a> "deadbeef"'
        assert extract_handle(document) is None

    def test_no_candidate(self):
        assert extract_handle("<html><body>Maintenance</body></html>") is None

    def test_patterns_follow_provider_host(self):
        patterns = build_extraction_patterns("sandbox.example.com")
        document = f'"{H2}" https://sandbox.example.com/api/{H1}'

        assert extract_handle(document, patterns) == H1
        assert patterns[0].pattern.startswith(r"sandbox\.example\.com")

    def test_any_provider_url(self):
        document = "see https://provider/api/deadbeefdeadbeefdeadbeefdeadbeef for details"
        assert extract_handle(document) == "deadbeefdeadbeefdeadbeefdeadbeef"
