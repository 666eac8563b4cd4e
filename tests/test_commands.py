import pytest

from flatpath.dsl.commands import CommandLabel, PathCommand
from flatpath.dsl.tokenizer import PathSyntaxError, PathTokenizer


def test_letter_case_sets_relative():
    assert PathCommand.from_char("M") == PathCommand(False, CommandLabel.MOVE)
    assert PathCommand.from_char("c") == PathCommand(True, CommandLabel.CUBIC_BEZIER)
    assert PathCommand.from_char("a").label is CommandLabel.ARC


def test_close_is_never_relative():
    assert PathCommand.from_char("z") == PathCommand(False, CommandLabel.END)
    assert PathCommand.from_char("Z") == PathCommand(False, CommandLabel.END)


def test_unknown_letter():
    assert PathCommand.from_char("X") is None
    assert PathCommand.from_char("e") is None


def test_repeated_move_becomes_line():
    assert PathCommand.from_char("m").repeated() == PathCommand(True, CommandLabel.LINE)
    assert PathCommand.from_char("M").repeated() == PathCommand(False, CommandLabel.LINE)
    q = PathCommand.from_char("q")
    assert q.repeated() == q


def test_numbers_and_separators():
    tok = PathTokenizer(" 10,-5.5  +3 .5.25-1")
    assert [tok.read_number() for _ in range(6)] == [10.0, -5.5, 3.0, 0.5, 0.25, -1.0]
    tok.skip_separators()
    assert tok.peek() is None


def test_number_stops_at_letter():
    tok = PathTokenizer("12L")
    assert tok.read_number() == 12.0
    assert not tok.at_number()
    assert tok.next_char() == "L"


def test_lone_point_is_not_a_number():
    with pytest.raises(PathSyntaxError) as info:
        PathTokenizer(" . 1").read_number()
    assert info.value.offset == 1


def test_end_of_data_while_reading():
    with pytest.raises(PathSyntaxError, match="end of path data"):
        PathTokenizer("  ").read_number()


def test_flags():
    tok = PathTokenizer("1,0 2")
    assert tok.read_flag() is True
    assert tok.read_flag() is False
    with pytest.raises(PathSyntaxError, match="0 or 1"):
        tok.read_flag()
