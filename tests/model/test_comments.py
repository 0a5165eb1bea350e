"""Tests for structured doc comments and hidden-marker detection."""

from searchlet.model.comments import (
    BlockTag,
    DocTree,
    InlineTag,
    TextNode,
    is_hidden,
    parse_comment,
)


class TestParseComment:
    """Block and inline tag splitting."""

    def test_plain_text(self) -> None:
        tree = parse_comment("Just a description.")
        assert tree.body == (TextNode("Just a description."),)
        assert tree.block_tags == ()

    def test_block_tags_split(self) -> None:
        tree = parse_comment("Adds.\n@param a first\n  continued\n@return sum")
        assert [t.name for t in tree.block_tags] == ["param", "return"]
        assert tree.block_tags[0].content == (TextNode("a first\n  continued"),)

    def test_inline_tags_split(self) -> None:
        tree = parse_comment("See {@link Foo#bar()} for details.")
        assert tree.body == (
            TextNode("See "),
            InlineTag("link", "Foo#bar()"),
            TextNode(" for details."),
        )

    def test_star_prefixed_lines(self) -> None:
        """Lines that still carry a leading * are recognized."""
        tree = parse_comment("Text.\n * @hidden")
        assert [t.name for t in tree.block_tags] == ["hidden"]

    def test_empty(self) -> None:
        assert parse_comment("") == DocTree()


class TestIsHidden:
    def test_none_tree(self) -> None:
        assert is_hidden(None) is False

    def test_hidden_block_tag(self) -> None:
        assert is_hidden(parse_comment("Internal API.\n@hidden")) is True

    def test_hidden_anywhere_in_tree(self) -> None:
        """Nested nodes are scanned, not only top-level tags."""
        tree = DocTree(block_tags=(BlockTag("apiNote", (BlockTag("hidden"),)),))
        assert is_hidden(tree) is True

    def test_inline_mention_is_not_hidden(self) -> None:
        assert is_hidden(parse_comment("Use the @hidden tag to hide things.")) is False

    def test_inline_tag_named_hidden_is_not_block(self) -> None:
        assert is_hidden(parse_comment("Odd {@hidden} usage.")) is False

    def test_other_tags(self) -> None:
        assert is_hidden(parse_comment("Doc.\n@deprecated use X\n@since 1.2")) is False
