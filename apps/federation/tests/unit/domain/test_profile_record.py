"""ProfileRecord 단위 테스트."""

from datetime import datetime, timezone

from apps.federation.domain.entities import ProfileRecord


class TestProfileRecord:
    """ProfileRecord 테스트."""

    def test_summary_properties_read_stored_fields(self) -> None:
        created = datetime(2025, 1, 1, tzinfo=timezone.utc)
        record = ProfileRecord(
            uid="kakao:555",
            provider="kakao",
            external_id="555",
            created_at=created,
            updated_at=created,
            fields={"email": None, "displayName": "kakao-user", "avatarUrl": "http://img"},
        )

        assert record.email is None
        assert record.display_name == "kakao-user"
        assert record.avatar_url == "http://img"

    def test_missing_fields_read_as_none(self) -> None:
        created = datetime(2025, 1, 1, tzinfo=timezone.utc)
        record = ProfileRecord(
            uid="naver:1",
            provider="naver",
            external_id="1",
            created_at=created,
            updated_at=created,
        )

        assert record.display_name is None
        assert record.avatar_url is None
