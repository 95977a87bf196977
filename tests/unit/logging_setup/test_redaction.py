"""Tests for the credential-redacting log processor."""

from samarthaa.logging import redact_secrets


class TestRedactSecrets:
    """Tests for redact_secrets."""

    def test_credentials_masked(self):
        event = {"event": "session_registered", "user_key": "a@x.com", "owner_token": "T1", "password": "secret1"}
        result = redact_secrets(None, "info", event)
        assert result == {"event": "session_registered", "user_key": "a@x.com", "owner_token": "***", "password": "***"}

    def test_other_keys_untouched(self):
        event = {"event": "session_ended", "user_key": "a@x.com", "deleted": 1}
        assert redact_secrets(None, "info", dict(event)) == event
