"""Tests for prefix compilation and command matching."""

import pytest

from toastr.core.prefix_matcher import CommandMatch, PrefixMatcher, compile_prefixes


class TestPrefixMatcher:
    """Tests for PrefixMatcher."""

    def test_match_command_and_args(self):
        """Command token and argument string are captured."""
        print("\n INPUT: prefixes ['!'], '!ping extra args'")
        result = PrefixMatcher(["!"]).match("!ping extra args")
        print(f" OUTPUT: {result}")
        assert result == CommandMatch(command_name="ping", args="extra args", prefix="!")

    def test_match_without_args(self):
        result = PrefixMatcher(["!"]).match("!ping")
        assert result is not None
        assert result.command_name == "ping"
        assert result.args == ""

    def test_command_token_allows_digits_underscore_hyphen(self):
        result = PrefixMatcher(["!"]).match("!so_2-go now")
        assert result.command_name == "so_2-go"
        assert result.args == "now"

    @pytest.mark.parametrize("message", ["hello !ping", "ping", " !ping", "?ping", ""])
    def test_message_without_prefix_does_not_match(self, message):
        assert PrefixMatcher(["!"]).match(message) is None

    def test_prefix_alone_does_not_match(self):
        assert PrefixMatcher(["!"]).match("! ping") is None

    def test_match_is_case_insensitive(self):
        """Mixed-case prefixes match the lower-cased message."""
        print("\n INPUT: prefixes ['@Toastr_Bot '], '@toastr_bot ping hi'")
        result = PrefixMatcher(["!", "@Toastr_Bot "]).match("@toastr_bot ping hi")
        print(f" OUTPUT: {result}")
        assert result is not None
        assert result.command_name == "ping"
        assert result.args == "hi"

    def test_prefixes_are_literal(self):
        matcher = PrefixMatcher([".", "$"])
        assert matcher.match("xping") is None
        assert matcher.match("$ping").command_name == "ping"
        assert matcher.match(".ping").command_name == "ping"

    def test_longest_overlapping_prefix_wins(self):
        result = PrefixMatcher(["!", "!!"]).match("!!ping")
        assert result.prefix == "!!"
        assert result.command_name == "ping"

    def test_overlap_falls_back_to_shorter_prefix(self):
        result = PrefixMatcher(["!!", "!"]).match("!ping")
        assert result.prefix == "!"
        assert result.command_name == "ping"

    def test_args_keep_remaining_lines(self):
        result = PrefixMatcher(["!"]).match("!say one\ntwo")
        assert result.args == "one\ntwo"

    def test_recompile_replaces_rule(self):
        matcher = PrefixMatcher(["!"])
        matcher.recompile(["?"])
        assert matcher.match("!ping") is None
        assert matcher.match("?ping").command_name == "ping"
        assert matcher.prefixes == ("?",)

    def test_empty_prefix_set_matches_nothing(self):
        matcher = PrefixMatcher([])
        assert matcher.is_inert
        assert matcher.match("!ping") is None
        assert matcher.match("ping") is None

    def test_empty_and_duplicate_prefixes_are_dropped(self):
        matcher = PrefixMatcher(["", "!", "!"])
        assert matcher.prefixes == ("!",)
        assert matcher.match("ping") is None

    def test_compile_prefixes_returns_none_for_empty_set(self):
        assert compile_prefixes([]) is None
        assert compile_prefixes(["!"]) is not None
