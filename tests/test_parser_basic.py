"""
Basic parser tests

Tests empty source, single lines, blocks, comments and syntax errors.
"""

import pytest

from gomodclean.lib.parser import Parser
from gomodclean.models.syntax import CommentBlock, Line, LineBlock, Position


class TestEmptyAndSimple:
    """Test empty source and simplest manifests"""

    def test_empty_source(self):
        """Empty string should parse to no statements"""
        syntax = Parser("").parse()
        assert syntax.name == "go.mod"
        assert syntax.stmts == []

    def test_whitespace_only(self):
        """Only whitespace should parse to no statements"""
        assert Parser("   \n\n  \t  \n").parse().stmts == []

    def test_single_line(self):
        syntax = Parser("module example.com/m\n").parse()

        assert syntax.stmts == [
            Line(tokens=["module", "example.com/m"], comment=None, position=Position("go.mod", 1))
        ]

    def test_no_trailing_newline(self):
        syntax = Parser("go 1.22").parse()
        assert syntax.stmts[0].tokens == ["go", "1.22"]

    def test_line_numbers_skip_blank_lines(self):
        syntax = Parser("module m\n\n\ngo 1.22\n").parse()
        assert [stmt.position.line for stmt in syntax.stmts] == [1, 4]

    def test_filename_recorded(self):
        syntax = Parser("module m\n", filename="tools.mod").parse()
        assert syntax.name == "tools.mod"
        assert syntax.stmts[0].position == Position("tools.mod", 1)


class TestComments:
    """Test trailing and standalone comments"""

    def test_trailing_comment(self):
        line = Parser("require golang.org/x/mod v0.17.0 // indirect\n").parse().stmts[0]

        assert line.tokens == ["require", "golang.org/x/mod", "v0.17.0"]
        assert line.comment == "// indirect"

    def test_comment_without_space(self):
        line = Parser("require a v1.0.0 //indirect\n").parse().stmts[0]
        assert line.comment == "//indirect"

    def test_standalone_comments_grouped(self):
        syntax = Parser("// first\n// second\n\n// third\nmodule m\n").parse()

        assert syntax.stmts[0] == CommentBlock(["// first", "// second"], Position("go.mod", 1))
        assert syntax.stmts[1] == CommentBlock(["// third"], Position("go.mod", 4))
        assert isinstance(syntax.stmts[2], Line)

    def test_trailing_comment_run_at_eof(self):
        syntax = Parser("module m\n// end\n").parse()
        assert isinstance(syntax.stmts[-1], CommentBlock)


class TestBlocks:
    """Test factored blocks"""

    def test_require_block(self):
        source = (
            "require (\n"
            "\tgithub.com/a/a v1.0.0\n"
            "\n"
            "\t// grouped\n"
            "\tgithub.com/b/b v1.2.0 // indirect\n"
            ")\n"
        )
        block = Parser(source).parse().stmts[0]

        assert isinstance(block, LineBlock)
        assert block.tokens == ["require"]
        assert block.position == Position("go.mod", 1)
        assert [line.tokens for line in block.lines] == [
            ["github.com/a/a", "v1.0.0"],
            ["github.com/b/b", "v1.2.0"],
        ]
        assert [line.position.line for line in block.lines] == [2, 5]
        assert block.lines[1].comment == "// indirect"

    def test_statements_after_block(self):
        syntax = Parser("require (\n\ta v1.0.0\n)\ngo 1.22\n").parse()

        assert isinstance(syntax.stmts[0], LineBlock)
        assert syntax.stmts[1].tokens == ["go", "1.22"]
        assert syntax.stmts[1].position.line == 4

    def test_inline_empty_block(self):
        block = Parser("require ()\n").parse().stmts[0]
        assert block == LineBlock(tokens=["require"], lines=[], position=Position("go.mod", 1))

    def test_replace_block(self):
        block = Parser("replace (\n\ta => ../a\n\tb v1.0.0 => c v1.1.0\n)\n").parse().stmts[0]

        assert block.tokens == ["replace"]
        assert block.lines[1].tokens == ["b", "v1.0.0", "=>", "c", "v1.1.0"]

    def test_retract_brackets(self):
        line = Parser("retract [v1.0.0, v1.9.9] // broken\n").parse().stmts[0]
        assert line.tokens == ["retract", "[", "v1.0.0", ",", "v1.9.9", "]"]


class TestSyntaxErrors:
    """Malformed manifests raise SyntaxError"""

    def test_unclosed_block(self):
        with pytest.raises(SyntaxError, match="not closed"):
            Parser("require (\n\ta v1.0.0\n").parse()

    def test_unexpected_close(self):
        with pytest.raises(SyntaxError, match=r"unexpected '\)'"):
            Parser("module m\n)\n").parse()

    def test_close_sharing_line(self):
        with pytest.raises(SyntaxError, match="own line"):
            Parser("require (\n\ta v1.0.0 )\n").parse()

    def test_nested_block(self):
        with pytest.raises(SyntaxError, match="nested"):
            Parser("require (\n\tfoo (\n)\n").parse()

    def test_paren_without_verb(self):
        with pytest.raises(SyntaxError, match="verb"):
            Parser("(\n)\n").parse()

    def test_paren_mid_line(self):
        with pytest.raises(SyntaxError, match="last token"):
            Parser("require ( a v1.0.0\n").parse()

    def test_unterminated_string(self):
        with pytest.raises(SyntaxError, match="go.mod:2"):
            Parser('module m\nrequire "example.com/q v1.0.0\n').parse()
