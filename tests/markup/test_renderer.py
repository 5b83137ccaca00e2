# topmark:header:start
#
#   project      : RichConsole
#   file         : test_renderer.py
#   file_relpath : tests/markup/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering tests: how markup resolves into styled runs on a sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

from richconsole.core.color import Color
from richconsole.core.effects import TextEffects
from richconsole.core.palette import Colors
from richconsole.markup.renderer import render_markup, render_runs
from richconsole.markup.style import DEFAULT_STYLE, Style
from richconsole.sink.memory import StyledRun

if TYPE_CHECKING:
    from richconsole.sink.memory import MemorySink


def test_plain_text_renders_as_one_default_run() -> None:
    """Text without control characters is emitted unchanged, unstyled."""
    assert render_runs("Hello, World!") == [StyledRun("Hello, World!")]


def test_escapes_render_literally() -> None:
    """`\\[` renders `[` and `\\\\` renders `\\`."""
    assert "".join(r.text for r in render_runs("\\[")) == "["
    assert "".join(r.text for r in render_runs("\\\\")) == "\\"
    assert "".join(r.text for r in render_runs("HP: \\[22/25]")) == "HP: [22/25]"


def test_nesting_restores_previous_style() -> None:
    """Closing an inner tag restores the enclosing style, not the default."""
    runs = render_runs("[red]a[italics]b[/]c[/]d")
    assert [(r.text, r.style) for r in runs] == [
        ("a", Style(foreground=Colors.RED)),
        ("b", Style(TextEffects.ITALICS, Colors.RED)),
        ("c", Style(foreground=Colors.RED)),
        ("d", DEFAULT_STYLE),
    ]


def test_overlay_color_wins() -> None:
    """The innermost color applies; both closes return to the default."""
    runs = render_runs("[red][blue]x[/][/]y")
    assert runs[0] == StyledRun("x", Colors.BLUE)
    assert runs[1] == StyledRun("y")


def test_effects_accumulate_across_tags() -> None:
    """Effects from enclosing tags persist in nested tags."""
    (run,) = render_runs("[underline][blink]x[/][/]")
    assert run.effects == TextEffects.UNDERLINE | TextEffects.BLINK


def test_unmatched_close_tags_are_ignored() -> None:
    """Stray `[/]` never underflow the stack."""
    assert render_runs("[/][/][/]text") == [StyledRun("text")]


def test_unclosed_tag_renders_literally() -> None:
    """A `[` without a matching `]` is plain text."""
    runs = render_runs("[unclosedtext")
    assert "".join(r.text for r in runs) == "[unclosedtext"
    assert all(r.style.is_default for r in runs)


def test_rgb_literal_foreground() -> None:
    """`(R,G,B)` sets the exact foreground color."""
    assert render_runs("[(10,20,30)]x[/]") == [StyledRun("x", Color(10, 20, 30))]


def test_background_prefix() -> None:
    """`b:` targets the background and leaves the foreground unset."""
    assert render_runs("[b:red]x[/]") == [StyledRun("x", None, Colors.RED)]


def test_unclosed_tags_at_end_are_fine() -> None:
    """Markup may end with tags still open."""
    assert render_runs("[red]x") == [StyledRun("x", Colors.RED)]


def test_color_interpolation_round_trips() -> None:
    """A `Color` formatted into markup resolves back to itself."""
    color = Colors.INDIAN_RED
    (run,) = render_runs(f"[{color} b:{color * 0.25} allcaps]x[/]")
    assert run.foreground == color
    assert run.background == Color(51, 23, 23)
    assert run.effects == TextEffects.ALL_CAPS


def test_text_is_not_transformed_by_the_renderer() -> None:
    """All caps is a sink concern; the renderer forwards the source text."""
    assert render_runs("[allcaps]abc[/]")[0].text == "abc"


def test_none_and_empty_render_nothing(memory_sink: MemorySink) -> None:
    """None and "" produce no output at all."""
    render_markup(None, memory_sink)
    render_markup("", memory_sink)
    assert memory_sink.runs == []


def test_render_to_sink(memory_sink: MemorySink) -> None:
    """Every text run is one `emit` call, in order."""
    render_markup("This is [red]colored[/] text, and this is [italics palegreen]italic[/].", memory_sink)
    assert [r.text for r in memory_sink.runs] == [
        "This is ",
        "colored",
        " text, and this is ",
        "italic",
        ".",
    ]
    assert memory_sink.runs[3] == StyledRun("italic", Colors.PALE_GREEN, None, TextEffects.ITALICS)
