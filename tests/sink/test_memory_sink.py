# topmark:header:start
#
#   project      : RichConsole
#   file         : test_memory_sink.py
#   file_relpath : tests/sink/test_memory_sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the in-memory sink and its run records."""

from __future__ import annotations

import json

from richconsole.core.color import Color
from richconsole.core.effects import TextEffects
from richconsole.sink.memory import MemorySink, StyledRun


def test_records_runs_in_order() -> None:
    """Each emit call appends one run."""
    sink = MemorySink()
    sink.emit("a", Color(1, 2, 3), None, TextEffects.NONE)
    sink.emit("b", None, None, TextEffects.ITALICS)
    assert sink.runs == [StyledRun("a", Color(1, 2, 3)), StyledRun("b", effects=TextEffects.ITALICS)]
    assert sink.text == "ab"


def test_to_dict_is_json_friendly() -> None:
    """Colors become lists and effects their markup keys."""
    run = StyledRun("x", None, Color(4, 5, 6), TextEffects.DOUBLE_UNDERLINE | TextEffects.ALL_CAPS)
    data = run.to_dict()
    assert data == {
        "text": "x",
        "foreground": None,
        "background": [4, 5, 6],
        "effects": ["doubleunderline", "allcaps"],
    }
    assert json.loads(json.dumps(data)) == data
