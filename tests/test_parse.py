"""Tests for splitting lines into words and building commands."""

import pytest

from hsh import parse
from hsh.parse import Command, parse_line, split_words


class TestSplitWords:
    def test_runs_of_delimiters_are_discarded(self):
        assert list(split_words("ls \t  -l\t\t/tmp ")) == ["ls", "-l", "/tmp"]

    def test_is_lazy(self):
        words = split_words("a b c")
        assert next(words) == "a"
        assert list(words) == ["b", "c"]

    def test_custom_delimiters(self):
        assert list(split_words("/usr/bin:/bin::", ":")) == ["/usr/bin", "/bin"]

    def test_limit_drops_extra_words(self):
        assert list(split_words("a b c d", limit=2)) == ["a", "b"]

    def test_input_is_unchanged(self):
        line = "  echo hi  "
        list(split_words(line))
        assert line == "  echo hi  "


class TestParseLine:
    @pytest.mark.parametrize("line", ["", "\n", "   ", "\t \t\n"])
    def test_blank_lines_give_no_command(self, line):
        assert parse_line(line) is None

    def test_builds_command(self):
        cmd = parse_line("  /bin/echo  hi there\n")
        assert cmd == Command(name="/bin/echo", args=("/bin/echo", "hi", "there"))
        assert cmd.arg_count == 3
        assert cmd.args[0] == cmd.name

    def test_single_word(self):
        cmd = parse_line("exit")
        assert cmd.name == "exit"
        assert cmd.arg_count == 1

    def test_truncates_silently_at_max_args(self):
        cmd = parse_line("echo 1 2 3 4 5", max_args=3)
        assert cmd.args == ("echo", "1", "2")

    def test_exactly_max_args_is_kept(self):
        cmd = parse_line("echo 1 2", max_args=3)
        assert cmd.args == ("echo", "1", "2")

    def test_builds_through_split_words(self, monkeypatch):
        seen = []
        real = parse.split_words

        def spy(text, delims, limit):
            seen.append(limit)
            return real(text, delims, limit)

        monkeypatch.setattr(parse, "split_words", spy)
        assert parse.parse_line("ls -l", max_args=5).args == ("ls", "-l")
        assert seen == [6]
