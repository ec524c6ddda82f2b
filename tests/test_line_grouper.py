from resume_render.textpipe.line_grouper import Line, group_lines
from resume_render.textpipe.tokens import Token


def _tok(text, x, y):
    return Token(text=text, x=x, y=y)


def test_one_line_per_row_run():
    toks = [
        _tok("Jane", 10, 100), _tok("Doe", 40, 101.5),
        _tok("Engineer", 10, 120),
        _tok("Go", 10, 140), _tok("Rust", 30, 144.9), _tok("C", 60, 140),
    ]
    lines = group_lines(toks)
    assert [l.raw_text for l in lines] == ["Jane Doe", "Engineer", "Go Rust C"]


def test_threshold_is_exclusive():
    # exactly 5 apart stays on the same line, just over starts a new one
    assert len(group_lines([_tok("a", 0, 100), _tok("b", 0, 105)])) == 1
    assert len(group_lines([_tok("a", 0, 100), _tok("b", 0, 105.01)])) == 2


def test_compares_against_previous_token_not_line_start():
    toks = [_tok("a", 0, 100), _tok("b", 0, 104), _tok("c", 0, 108), _tok("d", 0, 112)]
    assert len(group_lines(toks)) == 1


def test_discovery_order_is_kept_inside_a_line():
    toks = [_tok("right", 200, 50), _tok("left", 10, 50)]
    (line,) = group_lines(toks)
    assert [t.text for t in line.tokens] == ["right", "left"]


def test_empty_input_and_custom_threshold():
    assert group_lines([]) == []
    toks = [_tok("a", 0, 100), _tok("b", 0, 108)]
    assert len(group_lines(toks, y_threshold=10)) == 1


def test_every_token_lands_in_exactly_one_line():
    toks = [_tok(str(i), i, (i // 3) * 20) for i in range(12)]
    lines = group_lines(toks)
    flat = [t for l in lines for t in l.tokens]
    assert flat == toks
    assert len(lines) == 4


def test_raw_text_joins_with_spaces():
    assert Line([_tok("a", 0, 0), _tok("b", 1, 0)]).raw_text == "a b"
    assert Line().raw_text == ""
