"""Tests for service name matching."""

from jaeger_simplejson.projection import match_services


class TestMatchServices:
    """Tests for match_services()."""

    def test_wildcard_returns_all_in_order(self):
        """Test that * returns the input unchanged."""
        names = ["zeta", "alpha", "payments"]
        assert match_services("*", names) == names

    def test_prefix_match_keeps_order(self):
        """Test prefix filtering."""
        names = ["payments", "payroll", "billing"]
        assert match_services("pay", names) == ["payments", "payroll"]

    def test_no_match(self):
        """Test that no match yields an empty list."""
        assert match_services("zzz", ["payments", "billing"]) == []

    def test_empty_candidates(self):
        """Test matching against no names."""
        assert match_services("*", []) == []
        assert match_services("pay", []) == []

    def test_case_sensitive(self):
        """Test that matching is case-sensitive."""
        assert match_services("Pay", ["payments", "Payroll"]) == ["Payroll"]

    def test_prefix_only(self):
        """Test that substrings elsewhere in the name do not match."""
        assert match_services("ment", ["payments"]) == []

    def test_empty_pattern_matches_all(self):
        """Test that an empty prefix matches every name."""
        assert match_services("", ["a", "b"]) == ["a", "b"]

    def test_wildcard_is_literal_elsewhere(self):
        """Test that * is only special as the whole pattern."""
        assert match_services("pay*", ["payments", "pay*ments"]) == ["pay*ments"]
