from __future__ import annotations

import pytest

import md_to_jira.literals as literals_module
from md_to_jira.exceptions import PlaceholderSpaceExhaustedError
from md_to_jira.literals import (
    extract_literals,
    find_sentinel,
    render_code_block,
    restore_literals,
)


def test_find_sentinel_picks_first_private_use_character():
    assert find_sentinel("plain text") == "\ue000"


def test_find_sentinel_skips_characters_present_in_text():
    assert find_sentinel("\ue000\ue001 text") == "\ue002"


def test_find_sentinel_honours_exclusions():
    assert find_sentinel("", exclude="\ue000") == "\ue001"


def test_find_sentinel_raises_when_every_candidate_is_used(monkeypatch):
    monkeypatch.setattr(literals_module, "SENTINEL_RANGES", (range(0xE000, 0xE002),))

    with pytest.raises(PlaceholderSpaceExhaustedError) as exc_info:
        find_sentinel("\ue000\ue001")

    assert exc_info.value.candidates == 2


def test_extract_without_literals_returns_text_unchanged():
    document = extract_literals("nothing to protect here")

    assert document.text == "nothing to protect here"
    assert len(document.code_blocks) == 0
    assert len(document.inline_code) == 0


def test_extract_fenced_block_with_language():
    document = extract_literals("```python\nprint(1)\n```")

    assert document.text == document.code_blocks.token(0)
    assert document.code_blocks.literals == ["{code:python}\nprint(1)\n{code}"]


def test_extract_fenced_block_without_language():
    document = extract_literals("before\n```\nx = 1\n```\nafter")

    assert document.text == f"before\n{document.code_blocks.token(0)}\nafter"
    assert document.code_blocks.literals == ["{code}\nx = 1\n{code}"]


def test_extract_trims_trailing_whitespace_of_block_body():
    document = extract_literals("```\nx = 1\n\n   \n```")

    assert document.code_blocks.literals == ["{code}\nx = 1\n{code}"]


def test_extract_keeps_block_interior_verbatim():
    body = "  indented\n\ttabbed\n# heading\n| a | b |\n**bold**"
    document = extract_literals(f"```\n{body}\n```")

    assert document.code_blocks.literals == [f"{{code}}\n{body}\n{{code}}"]


def test_extract_does_not_scan_block_interior_for_inline_code():
    document = extract_literals("```\nuse `x` here\n```")

    assert len(document.code_blocks) == 1
    assert len(document.inline_code) == 0


def test_extract_tilde_fence():
    document = extract_literals("~~~\n~~not struck~~\n~~~")

    assert document.code_blocks.literals == ["{code}\n~~not struck~~\n{code}"]


def test_extract_requires_matching_closing_fence():
    document = extract_literals("~~~\ncode\n```")

    assert len(document.code_blocks) == 0


def test_extract_accepts_longer_closing_fence():
    document = extract_literals("```\n# Not a heading\n**not bold**\n````\nafter")

    assert document.text == f"{document.code_blocks.token(0)}\nafter"
    assert document.code_blocks.literals == ["{code}\n# Not a heading\n**not bold**\n{code}"]


def test_shorter_inner_fence_does_not_close_block():
    document = extract_literals("````\n```\nnested\n````")

    assert document.code_blocks.literals == ["{code}\n```\nnested\n{code}"]


def test_extract_accepts_crlf_closing_fence():
    document = extract_literals("```\r\nx = 1\r\n```\r\nafter")

    assert document.code_blocks.literals == ["{code}\nx = 1\n{code}"]


def test_unclosed_fence_passes_through():
    document = extract_literals("```\ncode without end")

    assert document.text == "```\ncode without end"
    assert len(document.code_blocks) == 0


def test_extract_inline_code_spans():
    document = extract_literals("Run `make` and `make test`")

    assert document.text == (
        f"Run {document.inline_code.token(0)} and {document.inline_code.token(1)}"
    )
    assert document.inline_code.literals == ["{{make}}", "{{make test}}"]


def test_inline_code_does_not_span_lines():
    document = extract_literals("a `b\nc` d")

    assert document.text == "a `b\nc` d"


def test_tokens_use_a_sentinel_absent_from_input():
    text = "\ue000I0\ue000 `x`"
    document = extract_literals(text)

    assert document.inline_code.sentinel not in text
    assert restore_literals(document.text, document) == "\ue000I0\ue000 {{x}}"


def test_restore_literals_round_trip():
    text = "Use `grep`:\n```bash\ngrep -r `pwd`\n```"
    document = extract_literals(text)

    restored = restore_literals(document.text, document)

    assert restored == "Use {{grep}}:\n{code:bash}\ngrep -r `pwd`\n{code}"


def test_render_code_block():
    assert render_code_block("x = 1\n", "python") == "{code:python}\nx = 1\n{code}"
    assert render_code_block("x = 1\n") == "{code}\nx = 1\n{code}"
