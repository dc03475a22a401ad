"""
Custom Pygments lexer for go.mod manifests

Drives both the Parser (via get_tokens_unprocessed) and terminal
highlighting of offending manifest lines in reports.

Token types:
- Keyword: Directive verbs at the start of a line (e.g., require, replace)
- Name: Bare words (module paths, versions, block-line tokens)
- String: Interpreted "..." and raw `...` strings
- Operator: The replace arrow =>
- Punctuation: Parentheses, brackets and commas
- Comment.Single: // comments
- Whitespace: Spaces, tabs and newlines
"""

from pygments.lexer import RegexLexer, words
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Operator,
    Punctuation,
    String,
    Whitespace,
)


# Verbs recognised by the Go toolchain in go.mod files
VERBS = (
    'module',
    'go',
    'toolchain',
    'godebug',
    'require',
    'replace',
    'exclude',
    'retract',
    'tool',
    'ignore',
)


class GoModLexer(RegexLexer):
    """
    Lexer for go.mod manifests

    Example:
        require (
            golang.org/x/mod v0.17.0 // indirect
        )

    Tokens:
        require → Keyword
        ( → Punctuation
        golang.org/x/mod → Name
        v0.17.0 → Name
        // indirect → Comment.Single
        ) → Punctuation
    """

    name = 'GoMod'
    aliases = ['gomod', 'go.mod']
    filenames = ['go.mod']
    mimetypes = ['text/x-gomod']

    tokens = {
        'root': [
            (r'//[^\n]*', Comment.Single),
            (r'\n', Whitespace),
            (r'[ \t\r]+', Whitespace),

            # Verbs only count at column 0; indented words are block lines
            (words(VERBS, prefix=r'^', suffix=r'(?=[\s(]|$)'), Keyword),

            (r'"(\\\\|\\"|[^"\\\n])*"', String.Double),
            (r'`[^`]*`', String.Backtick),
            (r'=>', Operator),
            (r'[()\[\],]', Punctuation),

            # Words may contain single slashes (module paths) but not //
            (r'(?:[^\s()\[\],"`/=]|/(?!/)|=(?!>))+', Name),
        ],
    }


def get_lexer() -> GoModLexer:
    """
    Get the GoModLexer instance

    Returns:
        GoModLexer instance ready for use with Pygments
    """
    return GoModLexer()
