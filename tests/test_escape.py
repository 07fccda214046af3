import html

import pytest

from xhtmlbuilder import Element, InvalidTextError


@pytest.mark.parametrize(
    "token",
    ["div", "DIV", "_x", "data-x", "a.b", "h1", "xmlns:xlink", "svg:g_1"],
)
def test_valid_tokens(token: str):
    assert Element.validateToken(token)
    assert Element(token).tagName == token.upper()


@pytest.mark.parametrize(
    "token",
    ["", "1div", "-x", "a b", "a:b:c", ":a", "a:", "a>", "div\n", "\u00e9"],
)
def test_invalid_tokens(token: str):
    assert not Element.validateToken(token)


def test_valid_text():
    assert Element.validateText("")
    assert Element.validateText("tab\tnewline\ncr\r")
    assert Element.validateText("caf\u00e9 \u2603 \U0001f600 \ufffd \ue000")


@pytest.mark.parametrize("text", ["\x00", "a\x01b", "\x0b", "\ud800", "\ufffe", "\uffff"])
def test_invalid_text(text: str):
    assert not Element.validateText(text)
    with pytest.raises(InvalidTextError):
        Element.escapeText(text)


def test_escape_all_entities():
    assert (
        Element.escapeText("a'b\"c<d>e&f")
        == "a&apos;b&quot;c&lt;d&gt;e&amp;f"
    )


def test_escape_does_not_double_escape():
    assert Element.escapeText("&lt;") == "&amp;lt;"


@pytest.mark.parametrize(
    "text", ["", "plain", "&amp;", "<a href='x'>\"q\"</a>", "\U0001f600 & \t"]
)
def test_escape_unescape(text: str):
    assert html.unescape(Element.escapeText(text)) == text


def test_category_tables():
    assert "br" in Element.VOID_ELEMENTS
    assert len(Element.VOID_ELEMENTS) == 14
    assert Element.RAW_TEXT_ELEMENTS == {"script", "style"}
    assert Element.ESCAPABLE_RAW_TEXT_ELEMENTS == {"textarea", "title"}
