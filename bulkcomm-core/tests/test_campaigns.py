"""
Unit Tests for Campaign Identifiers
===================================
Short IDs and recipient tokens.
"""

import pytest


class TestShortId:
    """Tests for campaign short IDs."""

    def test_generate_short_id(self):
        """Should produce five uppercase alphanumerics."""
        from bulkcomm_core.campaigns import generate_short_id, is_valid_short_id

        for _ in range(50):
            short_id = generate_short_id()
            assert len(short_id) == 5
            assert is_valid_short_id(short_id)

    def test_is_valid_short_id(self):
        """Should reject wrong length, case or type."""
        from bulkcomm_core.campaigns import is_valid_short_id

        assert is_valid_short_id("AB12C") is True
        assert is_valid_short_id("ab12c") is False
        assert is_valid_short_id("AB12") is False
        assert is_valid_short_id("AB12CD") is False
        assert is_valid_short_id("AB-2C") is False
        assert is_valid_short_id("") is False
        assert is_valid_short_id(None) is False
        assert is_valid_short_id(12345) is False

    @pytest.mark.asyncio
    async def test_unique_short_id_skips_taken(self):
        """Should keep generating until the check passes."""
        from bulkcomm_core.campaigns import generate_unique_short_id

        checked = []

        async def check_exists(short_id):
            checked.append(short_id)
            return len(checked) < 3

        short_id = await generate_unique_short_id(check_exists)

        assert len(checked) == 3
        assert short_id == checked[-1]

    @pytest.mark.asyncio
    async def test_unique_short_id_exhausted(self):
        """Should give up after the attempt budget."""
        from bulkcomm_core.campaigns import generate_unique_short_id
        from bulkcomm_core.errors import ShortIdExhaustedError

        calls = []

        async def always_taken(short_id):
            calls.append(short_id)
            return True

        with pytest.raises(ShortIdExhaustedError) as exc_info:
            await generate_unique_short_id(always_taken, max_attempts=5)

        assert len(calls) == 5
        assert exc_info.value.attempts == 5
        assert "after 5 attempts" in str(exc_info.value)


class TestRecipientLinks:
    """Tests for recipient tokens and campaign link placeholders."""

    def test_generate_recipient_token(self):
        """Should produce eight uppercase alphanumerics."""
        import re
        from bulkcomm_core.campaigns import generate_recipient_token

        token = generate_recipient_token()

        assert re.fullmatch(r"[A-Z0-9]{8}", token)

    def test_personal_link(self):
        """Placeholder and link helpers are reachable from campaigns."""
        from bulkcomm_core.campaigns import campaign_link_placeholder, recipient_link

        assert campaign_link_placeholder("abcdef12-3456") == "{{ link_abcdef12 }}"
        assert recipient_link("https://your-domain.com", "ZX81AB12") == "https://your-domain.com/ZX81AB12"

    def test_issue_recipient_link(self):
        """Should build the personal link on the configured public site."""
        from bulkcomm_core.campaigns import issue_recipient_link
        from bulkcomm_core.config import Settings

        settings = Settings(
            backend_url="https://backend.test",
            backend_key="key",
            public_base_url="https://go.example.com/",
        )

        token, link = issue_recipient_link(settings)

        assert len(token) == 8
        assert link == f"https://go.example.com/{token}"
