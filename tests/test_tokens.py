import pytest

from resume_render.textpipe.tokens import Token, fragment_to_token, ingest_fragments

from conftest import frag


def test_ingest_keeps_order_and_trims():
    toks = ingest_fragments([frag("  Hello ", 10, 700), frag("World", 50, 700)])
    assert [t.text for t in toks] == ["Hello", "World"]
    assert (toks[0].x, toks[0].y, toks[0].font_name) == (10.0, 700.0, "Helvetica")


def test_ingest_drops_empty_and_whitespace_text():
    toks = ingest_fragments([frag("", 0, 0), frag("   ", 1, 1), frag("\t\n", 2, 2), frag("x", 3, 3)])
    assert [t.text for t in toks] == ["x"]


@pytest.mark.parametrize("item", [
    {"str": "a"},                                    # no transform
    {"str": "a", "transform": [1, 0, 0, 1]},         # too short
    {"str": "a", "transform": [1, 0, 0, 1, "x", 2]}, # non-numeric
    {"str": None, "transform": [1, 0, 0, 1, 2, 3]},
    "not a mapping",
])
def test_malformed_fragments_are_skipped(item):
    assert fragment_to_token(item) is None
    assert ingest_fragments([item]) == []


def test_text_key_and_missing_font_name():
    tok = fragment_to_token({"text": "Go", "transform": [1, 0, 0, 1, 4, 5]})
    assert tok == Token(text="Go", x=4.0, y=5.0, font_name="")


def test_token_is_immutable():
    tok = Token("a", 1, 2)
    with pytest.raises(AttributeError):
        tok.text = "b"
    linked = tok.with_link("https://x.dev")
    assert linked.link_url == "https://x.dev" and tok.link_url is None
