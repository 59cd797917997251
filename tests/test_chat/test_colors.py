"""Unit tests for the legacy marker alphabet."""

import pytest

from mud_chat.chat.colors import ALL_CODES, ChatColor


@pytest.mark.unit
class TestChatColor:
    def test_str_is_marker(self):
        assert str(ChatColor.RED) == "§c"
        assert str(ChatColor.BOLD) == "§l"

    def test_get_by_char(self):
        assert ChatColor.get_by_char("c") is ChatColor.RED
        assert ChatColor.get_by_char("L") is ChatColor.BOLD
        assert ChatColor.get_by_char("z") is None

    def test_is_format(self):
        assert ChatColor.ITALIC.is_format
        assert ChatColor.RESET.is_format
        assert not ChatColor.WHITE.is_format

    def test_every_code_has_a_member(self):
        assert all(ChatColor.get_by_char(code) is not None for code in ALL_CODES)


@pytest.mark.unit
class TestStripColor:
    def test_removes_markers(self):
        assert ChatColor.strip_color("§c§lHello§r world") == "Hello world"

    def test_uppercase_codes(self):
        assert ChatColor.strip_color("§CHi") == "Hi"

    def test_leaves_unknown_sequences(self):
        assert ChatColor.strip_color("§zHi") == "§zHi"

    def test_none_passthrough(self):
        assert ChatColor.strip_color(None) is None


@pytest.mark.unit
class TestTranslateAlternateColorCodes:
    def test_rewrites_valid_codes(self):
        assert ChatColor.translate_alternate_color_codes("&", "&cRed &LBold") == "§cRed §lBold"

    def test_leaves_lone_alt_char(self):
        assert ChatColor.translate_alternate_color_codes("&", "fish & chips&") == "fish & chips&"
