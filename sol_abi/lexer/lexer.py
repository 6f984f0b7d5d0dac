"""
Lexer implementation for ABI signature text.

The Lexer tokenizes a signature such as ``transfer(address,uint256)``
into a stream of tokens that can be consumed by the parser. Whitespace
is not part of the signature grammar and is rejected.
"""

from typing import List

from ..errors import ParseError
from .tokens import Token, TokenType, SINGLE_CHAR_OPS, IDENTIFIER_CHARS


class Lexer:
    """
    Lexer for ABI signature text.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        return ch

    def read_number(self) -> str:
        """Read a run of decimal digits."""
        result = ''
        while self.peek() and self.peek() in '0123456789':
            result += self.advance()
        return result

    def read_identifier(self) -> str:
        """Read an identifier or type keyword (e.g. ``uint256``, ``fixed128x18``)."""
        result = ''
        while self.peek() and self.peek() in IDENTIFIER_CHARS:
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.

        Raises:
            ParseError: on any character outside the signature alphabet.
        """
        while self.pos < len(self.source):
            start = self.pos
            ch = self.peek()

            if ch in '0123456789':
                self.tokens.append(Token(TokenType.NUMBER, self.read_number(), start))
                continue

            if ch in IDENTIFIER_CHARS:
                self.tokens.append(Token(TokenType.IDENTIFIER, self.read_identifier(), start))
                continue

            if ch in SINGLE_CHAR_OPS:
                self.advance()
                self.tokens.append(Token(SINGLE_CHAR_OPS[ch], ch, start))
                continue

            if ch.isspace():
                raise ParseError('Unexpected whitespace', self.source, start)
            raise ParseError(f'Unexpected character {ch!r}', self.source, start)

        self.tokens.append(Token(TokenType.EOF, '', self.pos))
        return self.tokens
