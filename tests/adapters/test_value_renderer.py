from __future__ import annotations

import sys

from lib_log_terminal.adapters.value_renderer import (
    ELIDED_ROW,
    ErrorValue,
    PlainValue,
    PrettyValueRenderer,
    classify,
    elide_rows,
)


def _render(value, *, width: int = 75, rows: int = 8, limited: bool = True) -> str:
    return PrettyValueRenderer().render(value, width=width, rows=rows, limited=limited)


def test_scalars_render_with_repr() -> None:
    assert _render(42) == "42"
    assert _render("text") == "'text'"


def test_limited_containers_are_elided() -> None:
    assert _render(list(range(100)), rows=1) == "[0, 1, 2, ... +97]"


def test_unlimited_containers_are_complete() -> None:
    rendered = _render(list(range(100)), limited=False)
    assert "99" in rendered
    assert "..." not in rendered


def test_long_strings_are_truncated_when_limited() -> None:
    assert "+480" in _render("x" * 500, width=20, rows=1)


def test_tall_values_keep_head_and_marker() -> None:
    rendered = _render({key: key for key in range(50)}, width=20, rows=3)
    lines = rendered.split("\n")
    assert len(lines) == 3
    assert lines[0] == "{"
    assert lines[-1] == ELIDED_ROW


def test_narrow_values_wrap_to_width() -> None:
    rendered = _render(list(range(30)), width=20, rows=40, limited=False)
    assert all(len(line) <= 20 for line in rendered.split("\n"))


def test_exceptions_render_type_and_message() -> None:
    assert _render(ValueError("bad")) == "ValueError: bad"
    assert _render(RuntimeError()) == "RuntimeError"


def test_exception_chain_follows_cause_and_context() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise ValueError("inner")
    except ValueError as exc:
        error = exc
    wrapper = RuntimeError("outer")
    wrapper.__cause__ = error

    assert _render(wrapper).split("\n") == [
        "RuntimeError: outer",
        "caused by: ValueError: inner",
        "during handling of: KeyError: 'k'",
    ]


def test_exception_with_traceback_renders_full_trace() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        _type, error, trace = sys.exc_info()

    rendered = _render((error, trace), limited=False)

    assert rendered.startswith("Traceback (most recent call last):")
    assert rendered.endswith("ValueError: boom")


def test_classify_distinguishes_errors() -> None:
    error = OSError("x")
    assert classify(error) == ErrorValue(error)
    assert classify((error, None)) == ErrorValue(error, None)
    assert classify((1, 2)) == PlainValue((1, 2))


def test_elide_rows_keeps_at_least_one_line_of_content() -> None:
    assert elide_rows("a\nb\nc", 1) == "a\n" + ELIDED_ROW
