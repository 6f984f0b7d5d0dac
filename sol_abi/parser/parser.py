"""
Signature parser implementation.

The Parser converts a stream of tokens from the Lexer into a
FunctionSelector or a single ABI type.
"""

from typing import Any, Callable, List

from ..errors import ParseError
from ..lexer import Lexer, Token, TokenType
from ..type_system import (
    AbiType,
    Array,
    FixedArray,
    Tuple,
    FunctionSelector,
    keyword_to_type,
)


class Parser:
    """
    Recursive descent parser for ABI signatures.

    Parses a stream of tokens into the type algebra. A Parser holds a
    cursor and is meant to be used for a single parse.
    """

    def __init__(self, tokens: List[Token], source: str = ''):
        self.tokens = tokens
        self.source = source
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            detail = f'Expected {token_type.name} but got {self.current().type.name}'
            if message:
                detail = f'{detail} ({message})'
            raise ParseError(detail, self.source, self.current().position)
        return self.advance()

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse_selector(self) -> FunctionSelector:
        """Parse ``[name] "(" [type ("," type)*] ")"`` followed by end of input."""
        name = None
        if self.match(TokenType.IDENTIFIER):
            name = self.advance().value

        inputs = self.parse_type_group()
        self.expect(TokenType.EOF, 'trailing characters after selector')
        return FunctionSelector(name=name, inputs=inputs)

    def parse_single_type(self) -> AbiType:
        """Parse one type expression followed by end of input."""
        abi_type = self.parse_type()
        self.expect(TokenType.EOF, 'trailing characters after type')
        return abi_type

    # =========================================================================
    # TYPE PARSING
    # =========================================================================

    def parse_type(self) -> AbiType:
        """Parse a base type followed by any number of array suffixes."""
        if self.match(TokenType.LPAREN):
            abi_type: AbiType = Tuple(self.parse_type_group())
        elif self.match(TokenType.IDENTIFIER):
            abi_type = self.parse_base_type()
        else:
            raise ParseError(
                f'Expected a type but got {self.current().type.name}',
                self.source, self.current().position,
            )

        # Each suffix wraps everything parsed so far: T[][3] is a 3-array of T[]
        while self.match(TokenType.LBRACKET):
            abi_type = self.parse_array_suffix(abi_type)
        return abi_type

    def parse_base_type(self) -> AbiType:
        """Parse an elementary type keyword such as ``uint256`` or ``bytes``."""
        token = self.expect(TokenType.IDENTIFIER)
        try:
            abi_type = keyword_to_type(token.value)
        except ValueError as e:
            raise ParseError(f'Invalid size in {token.value[:32]!r}: {e}', self.source, token.position) from None
        if abi_type is None:
            raise ParseError(f'Unknown type {token.value!r}', self.source, token.position)
        return abi_type

    def parse_array_suffix(self, element: AbiType) -> AbiType:
        """Parse ``[]`` or ``[N]`` and wrap ``element`` accordingly."""
        self.expect(TokenType.LBRACKET)
        if self.match(TokenType.RBRACKET):
            self.advance()
            return Array(element)
        token = self.expect(TokenType.NUMBER, 'array length')
        try:
            length = int(token.value)
        except ValueError as e:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise ParseError(f'Invalid array length: {e}', self.source, token.position) from None
        self.expect(TokenType.RBRACKET, 'unterminated array suffix')
        return FixedArray(element, length)

    def parse_type_group(self) -> List[AbiType]:
        """Parse a parenthesized, comma-separated list of types (possibly empty)."""
        self.expect(TokenType.LPAREN)
        types: List[AbiType] = []

        if self.match(TokenType.RPAREN):
            self.advance()
            return types

        while True:
            types.append(self.parse_type())
            if self.match(TokenType.COMMA):
                self.advance()
                continue
            break

        self.expect(TokenType.RPAREN, 'unbalanced parentheses')
        return types


# =============================================================================
# MODULE-LEVEL ENTRY POINTS
# =============================================================================

def _parser_for(text: str) -> Parser:
    if not isinstance(text, str):
        raise TypeError(f'expected str, got {type(text).__name__}')
    tokens = Lexer(text).tokenize()
    return Parser(tokens, text)


def _run(text: str, parse: Callable[[Parser], Any]) -> Any:
    parser = _parser_for(text)
    try:
        return parse(parser)
    except RecursionError:
        raise ParseError('Nesting too deep', text) from None


def parse_selector(text: str) -> FunctionSelector:
    """
    Parse a function signature such as ``transfer(address,uint256)``.

    The name is optional: ``(uint256,bool)`` yields a selector whose
    name is None.

    Raises:
        ParseError: if the text does not match the selector grammar.
    """
    return _run(text, Parser.parse_selector)


def parse_type(text: str) -> AbiType:
    """
    Parse a single type expression such as ``address[][3]``.

    Raises:
        ParseError: on unknown keywords, malformed suffixes or trailing text.
    """
    return _run(text, Parser.parse_single_type)


def parse_type_list(text: str) -> List[AbiType]:
    """
    Parse a comma-separated list of types without surrounding parentheses.

    ``parse_type_list("")`` returns an empty list. Error positions refer
    to ``text`` itself.
    """
    try:
        tuple_type = parse_type(f'({text})')
    except ParseError as e:
        position = None if e.position is None else max(e.position - 1, 0)
        raise ParseError(e.reason, text, position) from None
    return list(tuple_type.elements)
