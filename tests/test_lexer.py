"""
Lexer tests - token types produced by GoModLexer
"""

from pygments.token import Comment, Error, Keyword, Name, Operator, Punctuation, String, Whitespace

from gomodclean.lib.lexer import GoModLexer, get_lexer


def significant(source: str):
    """(tokentype, value) pairs without whitespace"""
    return [
        (ttype, value)
        for _, ttype, value in GoModLexer().get_tokens_unprocessed(source)
        if ttype not in Whitespace
    ]


class TestTokens:
    """Test token classification"""

    def test_require_line(self):
        assert significant("require golang.org/x/mod v0.17.0 // indirect\n") == [
            (Keyword, "require"),
            (Name, "golang.org/x/mod"),
            (Name, "v0.17.0"),
            (Comment.Single, "// indirect"),
        ]

    def test_verbs_only_at_line_start(self):
        """Indented words inside a block are names, not verbs"""
        tokens = significant("tool (\n\tgo v1.0.0\n)\n")

        assert tokens[0] == (Keyword, "tool")
        assert (Name, "go") in tokens
        assert (Keyword, "go") not in tokens

    def test_verb_prefix_is_a_name(self):
        """A word that merely starts with a verb is not a verb"""
        assert significant("gopkg.in/yaml.v3\n") == [(Name, "gopkg.in/yaml.v3")]

    def test_punctuation_and_operator(self):
        tokens = significant("replace a => b v1.0.0\nretract [v1.0.0, v1.1.0]\n")

        assert (Operator, "=>") in tokens
        assert (Punctuation, "[") in tokens
        assert (Punctuation, ",") in tokens
        assert (Punctuation, "]") in tokens

    def test_strings(self):
        tokens = significant('module "example.com/q"\nrequire `raw` v1\n')

        assert (String.Double, '"example.com/q"') in tokens
        assert (String.Backtick, "`raw`") in tokens

    def test_comment_glued_to_word(self):
        assert significant("v1.0.0//indirect") == [
            (Name, "v1.0.0"),
            (Comment.Single, "//indirect"),
        ]

    def test_unterminated_string_is_error(self):
        tokens = significant('module "example.com/q\n')
        assert any(ttype is Error for ttype, _ in tokens)


class TestLexerMetadata:
    """Test Pygments registration attributes"""

    def test_get_lexer(self):
        lexer = get_lexer()
        assert isinstance(lexer, GoModLexer)
        assert "gomod" in lexer.aliases
        assert "go.mod" in lexer.filenames
