from __future__ import annotations

import pytest

from md_to_jira.inline import (
    rewrite_emphasis,
    rewrite_images,
    rewrite_inline,
    rewrite_links,
    rewrite_strikethrough,
)

MARKER = "\ue000"


@pytest.mark.parametrize(
    ("markdown", "expected"),
    [
        ("**bold**", "*bold*"),
        ("**bold text**", "*bold text*"),
        ("__bold text__", "*bold text*"),
        ("*italic*", "_italic_"),
        ("*italic text*", "_italic text_"),
        ("_italic text_", "_italic text_"),
        ("**bold** and *italic*", "*bold* and _italic_"),
        ("*italic* then **bold**", "_italic_ then *bold*"),
        ("***both***", "*_both_*"),
        ("**bold with *italic* inside**", "*bold with _italic_ inside*"),
    ],
)
def test_emphasis(markdown: str, expected: str):
    assert rewrite_inline(markdown) == expected


@pytest.mark.parametrize(
    "text",
    [
        "a*b*c",
        "2 * 3 * 4",
        "snake__case__name",
        "** not bold **",
        "* not italic *",
        "****",
    ],
)
def test_emphasis_lookalikes_pass_through(text: str):
    assert rewrite_inline(text) == text


def test_emphasis_does_not_cross_lines():
    assert rewrite_inline("*start\nend*") == "*start\nend*"


def test_rewrite_emphasis_resolves_marker():
    assert rewrite_emphasis("**bold** and *italic*", MARKER) == "*bold* and _italic_"


def test_bold_marker_avoids_characters_in_text():
    assert rewrite_inline(f"{MARKER} **bold**") == f"{MARKER} *bold*"


def test_list_sigil_is_not_read_as_italic():
    assert rewrite_inline("* Feature 1\n* Feature 2") == "* Feature 1\n* Feature 2"


def test_emphasis_inside_list_items():
    assert rewrite_inline("* *item*\n** **deep** item") == "* _item_\n** *deep* item"


def test_strikethrough():
    assert rewrite_strikethrough("~~gone~~ and ~~this too~~") == "-gone- and -this too-"


def test_strikethrough_requires_hugging_delimiters():
    assert rewrite_strikethrough("~~ spaced ~~") == "~~ spaced ~~"


def test_image_with_alt_text():
    assert (
        rewrite_images("![alt text](https://example.com/img.png)")
        == "!https://example.com/img.png|alt=alt text!"
    )


def test_image_without_alt_text():
    assert rewrite_images("![](https://example.com/img.png)") == "!https://example.com/img.png!"


def test_link():
    assert rewrite_links("[link text](https://example.com)") == "[link text|https://example.com]"


def test_link_in_sentence():
    result = rewrite_inline("See [docs](https://docs.example.com) for info")

    assert result == "See [docs|https://docs.example.com] for info"


def test_image_is_not_taken_for_a_link():
    assert rewrite_inline("![logo](logo.png)") == "!logo.png|alt=logo!"


def test_linked_image():
    result = rewrite_inline("[![logo](logo.png)](https://example.com)")

    assert result == "[!logo.png|alt=logo!|https://example.com]"


def test_link_with_bold_text():
    assert rewrite_inline("[**docs**](https://x.io)") == "[*docs*|https://x.io]"
