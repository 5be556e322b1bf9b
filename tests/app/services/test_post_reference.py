"""Testes de resolve_post_reference (ID numerico e formatos de URL)."""

from __future__ import annotations

import pytest

from app.services.post_reference import is_canonical_id, resolve_post_reference


class TestNumericInput:
    """Entradas numericas."""

    @pytest.mark.parametrize("raw", ["0", "42", "1234567890123456789"])
    def test_digits_returned_unchanged(self, raw: str) -> None:
        assert resolve_post_reference(raw) == raw

    def test_digits_are_trimmed(self) -> None:
        assert resolve_post_reference("  1234  ") == "1234"

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_input_returns_none(self, raw: str | None) -> None:
        assert resolve_post_reference(raw) is None

    def test_whitespace_only_returns_none(self) -> None:
        assert resolve_post_reference("   ") is None

    def test_non_ascii_digits_are_not_canonical(self) -> None:
        assert resolve_post_reference("١٢٣") is None


class TestUrlInput:
    """Entradas em formato de URL."""

    @pytest.mark.parametrize(
        "raw",
        [
            "https://twitter.com/foo/status/42",
            "https://x.com/foo/status/42",
            "https://example.com/foo/status/42",
            "https://mobile.twitter.com/foo/status/42?s=20",
            "twitter.com/foo/status/42",
            "https://x.com/foo/status/42/photo/1",
        ],
    )
    def test_status_urls_resolve(self, raw: str) -> None:
        assert resolve_post_reference(raw) == "42"

    def test_structural_fallback_handles_nested_path(self) -> None:
        raw = "https://nitter.net/i/web/status/1790000000000000000"
        assert resolve_post_reference(raw) == "1790000000000000000"

    def test_structural_fallback_requires_numeric_segment(self) -> None:
        assert resolve_post_reference("https://example.com/foo/status/abc") is None

    def test_status_without_following_segment(self) -> None:
        assert resolve_post_reference("https://example.com/foo/status/") is None

    def test_relative_path_is_not_a_url(self) -> None:
        assert resolve_post_reference("foo/status/42") is None

    def test_plain_text_returns_none(self) -> None:
        assert resolve_post_reference("not a url at all") is None

    def test_malformed_url_returns_none(self) -> None:
        assert resolve_post_reference("http://[::1/status/42") is None

    def test_short_link_is_unresolvable(self) -> None:
        assert resolve_post_reference("https://t.co/AbCdEf123") is None

    def test_short_link_with_status_path_is_still_unresolvable(self) -> None:
        assert resolve_post_reference("https://t.co/foo/status/42") is None


class TestIsCanonicalId:
    """Predicado de ID canonico."""

    def test_accepts_digits(self) -> None:
        assert is_canonical_id("123") is True

    @pytest.mark.parametrize("value", ["", "12a", " 12", "-1"])
    def test_rejects_non_digits(self, value: str) -> None:
        assert is_canonical_id(value) is False
