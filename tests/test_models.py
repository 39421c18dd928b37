from md_to_jira.models import ExtractedDocument, LiteralKind, PlaceholderTable, Stage


def test_literal_kind_members():
    assert list(LiteralKind) == [LiteralKind.CODE_BLOCK, LiteralKind.INLINE_CODE]
    assert LiteralKind.CODE_BLOCK.value == "B"
    assert LiteralKind.INLINE_CODE.value == "I"


def test_placeholder_table_defaults():
    table = PlaceholderTable(LiteralKind.INLINE_CODE, "\ue000")

    assert table.literals == []
    assert len(table) == 0


def test_placeholder_table_add_returns_indexed_tokens():
    table = PlaceholderTable(LiteralKind.CODE_BLOCK, "\ue000")

    first = table.add("{code}\na\n{code}")
    second = table.add("{code}\nb\n{code}")

    assert first == "\ue000B0\ue000"
    assert second == "\ue000B1\ue000"
    assert len(table) == 2


def test_placeholder_table_pattern_matches_only_its_kind():
    blocks = PlaceholderTable(LiteralKind.CODE_BLOCK, "\ue000")
    inline = PlaceholderTable(LiteralKind.INLINE_CODE, "\ue000")
    block_token = blocks.add("x")
    inline_token = inline.add("y")

    assert blocks.pattern.fullmatch(block_token)
    assert blocks.pattern.fullmatch(inline_token) is None
    assert inline.pattern.fullmatch(inline_token).group(1) == "0"


def test_extracted_document_holds_both_tables():
    blocks = PlaceholderTable(LiteralKind.CODE_BLOCK, "\ue000")
    inline = PlaceholderTable(LiteralKind.INLINE_CODE, "\ue000")

    document = ExtractedDocument(text="text", code_blocks=blocks, inline_code=inline)

    assert document.code_blocks is blocks
    assert document.inline_code is inline


def test_stage_is_callable():
    stage = Stage("reverse", lambda text: text[::-1])

    assert stage.name == "reverse"
    assert stage("abc") == "cba"
