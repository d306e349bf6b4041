"""User code helper tests."""

from __future__ import annotations

from apps.auth.domain.value_objects import format_user_code_input, normalize_user_code


class TestNormalizeUserCode:
    """승인 요청 전 코드 정규화 테스트."""

    def test_strips_hyphen_and_uppercases(self) -> None:
        assert normalize_user_code("abcd-1234") == "ABCD1234"

    def test_trims_whitespace(self) -> None:
        assert normalize_user_code("  wxyz-9876 \n") == "WXYZ9876"

    def test_empty_input(self) -> None:
        assert normalize_user_code("   ") == ""


class TestFormatUserCodeInput:
    """입력 중 코드 포맷 테스트."""

    def test_inserts_hyphen_after_four(self) -> None:
        assert format_user_code_input("abcd1234") == "ABCD-1234"

    def test_short_input_has_no_hyphen(self) -> None:
        assert format_user_code_input("abcd") == "ABCD"

    def test_drops_non_alphanumeric(self) -> None:
        assert format_user_code_input("ab!c d-12_34") == "ABCD-1234"

    def test_truncates_to_eight_characters(self) -> None:
        assert format_user_code_input("ABCD12345678") == "ABCD-1234"

    def test_idempotent(self) -> None:
        """이미 포맷된 값은 그대로."""
        assert format_user_code_input("ABCD-1234") == "ABCD-1234"
