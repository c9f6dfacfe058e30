''' Line tokenizer '''

from typing import List

import pyparsing as pp

from miniasm.common.conf import BLANK_CHARS, COMMENT_CHAR
from miniasm.common.ops import Token, TokenKind
import miniasm.common.errors as e


def blank_sep(element: pp.ParserElement) -> pp.ParserElement:
    # Only spaces and tabs separate tokens
    return element.set_whitespace_chars(BLANK_CHARS, copy_defaults=False)


def g_token(element: pp.ParserElement, kind: TokenKind) -> pp.ParserElement:
    return blank_sep(element).set_parse_action(lambda r: Token(kind, r[0]))


identifier = g_token(pp.Word(pp.alphas + '_', pp.alphanums + '_'), TokenKind.IDENTIFIER)

# A sign without digits is still a number, rejected when the value is used
number = g_token(pp.Regex('[+-][0-9]*|[0-9]+'), TokenKind.NUMBER)

# Runs up to the next quote, no escapes
string = blank_sep(pp.Regex("'[^']*'")).set_parse_action(
    lambda r: Token(TokenKind.STRING, r[0][1:-1])
)

comma = g_token(pp.Literal(','), TokenKind.COMMA)
colon = g_token(pp.Literal(':'), TokenKind.COLON)

token = blank_sep(pp.MatchFirst([identifier, number, string, comma, colon]))

comment = blank_sep(pp.Suppress(blank_sep(pp.Regex(f'{COMMENT_CHAR}.*'))))

line = blank_sep(
    blank_sep(pp.ZeroOrMore(token))
    + blank_sep(pp.Opt(comment))
    + blank_sep(pp.StringEnd())
)


def failure(text: str, loc: int, lineno: int) -> e.AsmError:
    while loc < len(text) and text[loc] in BLANK_CHARS:
        loc += 1

    char = text[loc] if loc < len(text) else ''

    if char == "'":
        return e.UnterminatedString(lineno)

    return e.UnknownCharacter(char, lineno)


def tokenize(text: str, lineno: int) -> List[Token]:
    try:
        return list(line.parse_string(text))

    except pp.ParseException as ex:
        raise failure(text, ex.loc, lineno) from ex
