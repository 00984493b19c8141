import io

import pytest

from twentyone.cardfx.keyboard import Keyboard


def test_read_key_one_char_at_a_time():
    kb = Keyboard(io.StringIO("hs"))
    kb.open()
    assert kb.read_key() == "h"
    assert kb.read_key() == "s"
    kb.close()


def test_read_line_strips_newline():
    kb = Keyboard(io.StringIO("Guy\r\n15\n"))
    assert kb.read_line() == "Guy"
    assert kb.read_line() == "15"


def test_closed_input_raises_eof():
    kb = Keyboard(io.StringIO(""))
    with pytest.raises(EOFError):
        kb.read_key()
    with pytest.raises(EOFError):
        kb.read_line()
