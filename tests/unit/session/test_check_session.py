"""Tests for the session ownership decision."""

from datetime import timedelta

from samarthaa.core.modules.session.models import MAX_TTL_DAYS, InvalidReason, SessionRecord
from samarthaa.core.modules.session.service import check_session


def make_record(token: str = "T1", ttl_days: float = 1) -> SessionRecord:
    return SessionRecord.issue("a@x.com", token, "Mac", ttl_days)


class TestCheckSession:
    """Tests for check_session."""

    def test_matching_token_before_expiry_is_valid(self):
        record = make_record()
        result = check_session(record, "T1", record.created_at + timedelta(hours=1))
        assert result.valid is True
        assert result.reason is None

    def test_missing_record_is_ended(self):
        result = check_session(None, "T1", make_record().created_at)
        assert result.valid is False
        assert result.reason == InvalidReason.ENDED

    def test_different_token_is_displaced(self):
        record = make_record(token="T2")
        result = check_session(record, "T1", record.created_at)
        assert result.valid is False
        assert result.reason == InvalidReason.DISPLACED

    def test_expired_record_with_matching_token(self):
        record = make_record()
        result = check_session(record, "T1", record.expires_at + timedelta(seconds=1))
        assert result.valid is False
        assert result.reason == InvalidReason.EXPIRED

    def test_expiry_checked_before_token(self):
        """An expired record reports expiry even when the token differs too."""
        record = make_record(token="T2")
        result = check_session(record, "T1", record.expires_at + timedelta(seconds=1))
        assert result.reason == InvalidReason.EXPIRED

    def test_expiry_boundary_is_exclusive(self):
        """Valid only while now < expires_at."""
        record = make_record()
        assert check_session(record, "T1", record.expires_at - timedelta(microseconds=1)).valid is True
        assert check_session(record, "T1", record.expires_at).reason == InvalidReason.EXPIRED

    def test_zero_ttl_is_born_expired(self):
        record = make_record(ttl_days=0)
        assert record.expires_at == record.created_at
        assert check_session(record, "T1", record.created_at).reason == InvalidReason.EXPIRED

    def test_negative_ttl_is_expired(self):
        record = make_record(ttl_days=-1)
        assert check_session(record, "T1", record.created_at).reason == InvalidReason.EXPIRED

    def test_ttl_of_one_day(self):
        record = make_record(ttl_days=1)
        assert record.expires_at - record.created_at == timedelta(days=1)

    def test_huge_ttl_is_capped(self):
        record = make_record(ttl_days=10_000_000)
        assert record.expires_at - record.created_at == timedelta(days=MAX_TTL_DAYS)
        negative = make_record(ttl_days=-10_000_000)
        assert negative.created_at - negative.expires_at == timedelta(days=MAX_TTL_DAYS)
