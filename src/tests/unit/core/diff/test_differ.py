# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import io
from unittest.mock import Mock

import pytest
from colorama import Fore

from diffview import Diff, DiffView
from diffview.core.diff.strategies import UnifiedDiff, WordDiff
from diffview.core.ui.theme import set_theme


def test_diff_selects_strategy():
    assert isinstance(Diff("hello world", "hello word").strategy, WordDiff)
    assert isinstance(Diff("a\nb\nc", "a\nx\nc").strategy, UnifiedDiff)


def test_string_render_is_idempotent(marker_theme):
    view = Diff("hello world", "hello word", theme=marker_theme)

    assert str(view) == str(view)


def test_word_scenario(marker_theme):
    out = str(Diff("hello world", "hello word", theme=marker_theme))

    transcript, patch_view = out.split("\n\n", 1)
    assert transcript.splitlines() == ["hello wor", "<del>l</>", "d"]
    assert "<del>-l</>" in patch_view.splitlines()


def test_unified_scenario(marker_theme):
    out = str(Diff("a\nb\nc", "a\nx\nc", theme=marker_theme))

    assert out.splitlines() == [
        "@@ -1,5 +1,5 @@",
        " a",
        "<del>-b</>",
        "<ins>+x</>",
        " c",
        "",
    ]


def test_equal_inputs_have_no_styled_output(marker_theme):
    for a in ("same text", "same\ntext"):
        out = str(Diff(a, a, theme=marker_theme))
        assert "<ins>" not in out
        assert "<del>" not in out


def test_print_adds_trailing_blank_line(marker_theme):
    view = Diff("a", "b", theme=marker_theme)
    buf = io.StringIO()

    view.print(file=buf)

    assert buf.getvalue() == str(view) + "\n"


def test_print_defaults_to_stdout(capsys, marker_theme):
    view = Diff("a\nb", "a\nc", theme=marker_theme)

    view.print()

    assert capsys.readouterr().out == str(view) + "\n"


def test_write_to_writes_utf8_bytes(marker_theme):
    view = Diff("café au lait", "cafe au lait", theme=marker_theme)
    sink = io.BytesIO()

    written = view.write_to(sink)

    assert sink.getvalue() == str(view).encode("utf-8")
    assert written == len(sink.getvalue())
    assert written > len(str(view))


def test_write_to_counts_bytes_when_sink_reports_none(marker_theme):
    view = Diff("a", "b", theme=marker_theme)
    sink = Mock()
    sink.write.return_value = None

    assert view.write_to(sink) == len(str(view).encode("utf-8"))


class TrickleSink:
    """Accepts at most ``limit`` bytes per write call."""

    def __init__(self, limit):
        self.limit = limit
        self.data = b""
        self.calls = 0

    def write(self, chunk):
        self.calls += 1
        taken = bytes(chunk[: self.limit])
        self.data += taken
        return len(taken)


def test_write_to_retries_partial_writes(marker_theme):
    view = Diff("hello world", "hello word", theme=marker_theme)
    sink = TrickleSink(limit=3)

    written = view.write_to(sink)

    assert sink.data == str(view).encode("utf-8")
    assert written == len(sink.data)
    assert sink.calls > 1


def test_write_to_raises_when_sink_stops_accepting(marker_theme):
    sink = TrickleSink(limit=0)

    with pytest.raises(OSError, match="short write"):
        Diff("a", "b", theme=marker_theme).write_to(sink)


def test_write_to_propagates_sink_errors(marker_theme):
    sink = Mock()
    sink.write.side_effect = BrokenPipeError("closed")

    with pytest.raises(BrokenPipeError):
        Diff("a", "b", theme=marker_theme).write_to(sink)


def test_all_render_targets_match(marker_theme):
    view = Diff("one\ntwo\n", "one\nthree\n", theme=marker_theme)
    printed = io.StringIO()
    sink = io.BytesIO()

    view.print(file=printed)
    view.write_to(sink)

    assert printed.getvalue()[:-1] == str(view) == sink.getvalue().decode("utf-8")


def test_default_theme_is_resolved_at_render_time():
    view = Diff("a", "b")

    assert Fore.RED in str(view)

    set_theme("mono")
    assert str(view) == "a\n" + "b\n" + "\n@@ -1 +1 @@\n-a\n+b\n\n"


def test_handle_wraps_any_strategy(marker_theme):
    class Shout:
        def render(self, out, theme):
            out.write(theme.apply("insertion", "HEY") + "\n")

    assert str(DiffView(Shout(), theme=marker_theme)) == "<ins>HEY</>\n"
