from adapters.expression_parser.cursor import Cursor


def test_current_char_at_valid_position():
    assert Cursor("abc", 1).current_char() == "b"


def test_current_char_past_end_returns_none():
    assert Cursor("def", 3).current_char() is None
    assert Cursor("def", 10).current_char() is None


def test_current_char_on_empty_string_returns_none():
    assert Cursor("").current_char() is None


def test_advance_moves_one_position():
    cursor = Cursor("abc")
    cursor.advance()
    assert cursor.pos == 1
    assert cursor.current_char() == "b"


def test_advance_skips_single_space():
    cursor = Cursor("d ef")
    cursor.advance()
    assert cursor.pos == 2
    assert cursor.current_char() == "e"


def test_advance_skips_only_one_space_of_a_run():
    cursor = Cursor("1  +")
    cursor.advance()
    assert cursor.pos == 2
    assert cursor.current_char() == " "


def test_advance_to_end_and_beyond_is_safe():
    cursor = Cursor("ghi", 2)
    cursor.advance()
    assert cursor.current_char() is None
    assert cursor.at_end()
    cursor.advance()
    cursor.advance()
    assert cursor.current_char() is None


def test_peek_next_does_not_move_or_skip_spaces():
    cursor = Cursor("1 2")
    assert cursor.peek_next() == " "
    assert cursor.pos == 0
    assert Cursor("1", 0).peek_next() is None
