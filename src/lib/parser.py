"""
Parser for go.mod manifests

Transforms manifest source text into a ManifestSyntax tree.

The parser operates in two phases:
1. Scanning: Lex the source with GoModLexer and fold tokens into rows,
   one per physical line
2. Grouping: Turn rows into top-level statements (lines, factored blocks
   and standalone comment runs)

The tree is purely syntactic. What a directive means is left to the
Extractor.

Example:
    >>> parser = Parser("module example.com/m\\n\\nrequire golang.org/x/mod v0.17.0\\n")
    >>> syntax = parser.parse()
    >>> syntax.stmts[1].tokens
    ['require', 'golang.org/x/mod', 'v0.17.0']
"""

from typing import List, Tuple

from pygments.token import Comment, Error, Whitespace

from ..models.parser import ScannedRow
from ..models.syntax import CommentBlock, Line, LineBlock, ManifestSyntax, Position
from .lexer import GoModLexer
from .log import LOG


class Parser:
    """
    Parser for go.mod syntax

    Handles:
    - Single directive lines with optional trailing comments
    - Factored blocks: verb ( ... )
    - Standalone comment runs
    - Multi-line raw strings (line numbers stay correct)
    - Error reporting with line numbers and source context
    """

    def __init__(self, source: str, filename: str = "go.mod"):
        """
        Initialize parser with source text

        Args:
            source: Raw manifest text (go.mod file contents)
            filename: Name recorded in every Position of the tree

        Attributes:
            source: Source text being parsed
            filename: Manifest file name
            line_number: Current line number in source (for error reporting)
            lexer: GoModLexer used for scanning
        """
        self.source = source
        self.filename = filename
        self.line_number = 1
        self.lexer = GoModLexer()

    def parse(self) -> ManifestSyntax:
        """
        Parse source text into a ManifestSyntax tree

        Returns:
            ManifestSyntax with top-level statements in document order.
            Empty/whitespace-only source yields no statements.

        Raises:
            SyntaxError: On unexpected characters, misplaced parentheses or
                         a block left open at end of file
        """
        syntax = ManifestSyntax(name=self.filename)
        rows = self.rows_scan()

        comments: List[str] = []
        comments_start = 0
        index = 0

        while index < len(rows):
            row = rows[index]

            if not row.tokens:
                if row.comment is not None:
                    if not comments:
                        comments_start = row.line_number
                    comments.append(row.comment)
                elif comments:
                    syntax.stmts.append(self.commentBlock_make(comments, comments_start))
                    comments = []
                index += 1
                continue

            if comments:
                syntax.stmts.append(self.commentBlock_make(comments, comments_start))
                comments = []

            if row.tokens[-1] == '(':
                block, index = self.block_parse(rows, index)
                syntax.stmts.append(block)
                continue

            # Empty block written on one line: verb ()
            if len(row.tokens) > 2 and row.tokens[-2:] == ['(', ')']:
                tokens = row.tokens[:-2]
                if '(' in tokens or ')' in tokens:
                    self.error("unexpected parenthesis in block header", row.line_number)
                syntax.stmts.append(
                    LineBlock(tokens=tokens, lines=[], position=self.position_make(row.line_number))
                )
                index += 1
                continue

            if '(' in row.tokens:
                self.error("'(' must be the last token on the line", row.line_number)
            if ')' in row.tokens:
                self.error("unexpected ')'", row.line_number)

            syntax.stmts.append(
                Line(tokens=row.tokens, comment=row.comment, position=self.position_make(row.line_number))
            )
            index += 1

        if comments:
            syntax.stmts.append(self.commentBlock_make(comments, comments_start))

        LOG(f"Parsed {len(syntax.stmts)} top-level statements from {self.filename}", level=3)
        return syntax

    def rows_scan(self) -> List[ScannedRow]:
        """
        Lex the source and fold tokens into one ScannedRow per line

        Returns:
            Rows in source order, including blank ones

        Raises:
            SyntaxError: If the lexer yields an Error token (e.g. an
                         unterminated string)
        """
        self.line_number = 1
        rows: List[ScannedRow] = []
        current = ScannedRow(line_number=1)

        for _, ttype, value in self.lexer.get_tokens_unprocessed(self.source):
            if ttype is Error:
                self.error(f"unexpected character {value!r}", self.line_number)

            if ttype in Whitespace:
                if value == '\n':
                    rows.append(current)
                    self.line_number += 1
                    current = ScannedRow(line_number=self.line_number)
                continue

            if ttype in Comment:
                current.comment = value
                continue

            current.tokens.append(value)
            # Raw strings may span lines
            self.line_number += value.count('\n')

        if not current.blank_is():
            rows.append(current)

        return rows

    def block_parse(self, rows: List[ScannedRow], index: int) -> Tuple[LineBlock, int]:
        """
        Parse a factored block starting at rows[index]

        Args:
            rows: All scanned rows
            index: Index of the header row (its last token is '(')

        Returns:
            The LineBlock and the index of the row following its ')'

        Raises:
            SyntaxError: If the header has no verb, the block nests another
                         block, ')' shares a line with other tokens, or the
                         file ends before ')'
        """
        header = rows[index]
        tokens = header.tokens[:-1]

        if not tokens:
            self.error("'(' must follow a directive verb", header.line_number)
        if '(' in tokens or ')' in tokens:
            self.error("unexpected parenthesis in block header", header.line_number)

        block = LineBlock(tokens=tokens, lines=[], position=self.position_make(header.line_number))
        index += 1

        while index < len(rows):
            row = rows[index]
            if row.tokens == [')']:
                LOG(
                    f"Block '{' '.join(tokens)}' at line {header.line_number}: "
                    f"{len(block.lines)} lines",
                    level=3,
                )
                return block, index + 1
            if ')' in row.tokens:
                self.error("')' must be on its own line", row.line_number)
            if '(' in row.tokens:
                self.error("blocks cannot be nested", row.line_number)
            if row.tokens:
                block.lines.append(
                    Line(tokens=row.tokens, comment=row.comment, position=self.position_make(row.line_number))
                )
            index += 1

        self.error(
            f"unexpected end of file: block opened at line {header.line_number} is not closed",
            header.line_number,
        )

    def position_make(self, line_number: int) -> Position:
        return Position(filename=self.filename, line=line_number)

    def commentBlock_make(self, comments: List[str], line_number: int) -> CommentBlock:
        return CommentBlock(comments=list(comments), position=self.position_make(line_number))

    def error(self, message: str, line_number: int) -> None:
        """
        Report parser error with source context

        Args:
            message: Human-readable error description
            line_number: 1-based line the error refers to

        Raises:
            SyntaxError: Always (this is an error reporting function)

        Example output:
            SyntaxError:
            go.mod:4: ')' must be on its own line
            Context: github.com/pkg/errors v0.9.1 )
        """
        lines = self.source.splitlines()
        context = lines[line_number - 1].strip() if 0 < line_number <= len(lines) else ""

        raise SyntaxError(
            f"\n{self.filename}:{line_number}: {message}\n"
            f"Context: {context}"
        )
