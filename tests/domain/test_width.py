from __future__ import annotations

import pytest

from lib_log_terminal.domain.width import visible_width


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("hello", 5),
        ("\x1b[31mred\x1b[0m", 3),
        ("\x1b[1;34mbold blue\x1b[22;39m!", 10),
        ("cut\x1b[1;3", 3),
    ],
)
def test_visible_width_skips_escape_sequences(text: str, expected: int) -> None:
    assert visible_width(text) == expected
