import pytest

import miniasm.common.errors as e
from miniasm.common.ops import Op, TokenKind, Token, MNEMONICS, SIGNATURES
from miniasm.asm.grammar import tokenize
from miniasm.asm.parser import parse


def parse_line(text: str, lineno: int = 1):
    return parse(tokenize(text, lineno), lineno)


def test_mov():
    instr = parse_line('mov a, 5', 3)

    assert instr.op is Op.MOV
    assert instr.line == 3
    assert instr.params == (Token(TokenKind.IDENTIFIER, 'a'), Token(TokenKind.NUMBER, '5'))


def test_label():
    instr = parse_line('function:')

    assert instr.op is Op.LABEL
    assert instr.params == (Token(TokenKind.IDENTIFIER, 'function'),)


@pytest.mark.parametrize('mnemonic', sorted(MNEMONICS))
def test_every_mnemonic_accepts_registers(mnemonic):
    op = MNEMONICS[mnemonic]
    arity = len(SIGNATURES.get(op, ('x', 'y')))
    operands = ', '.join(f'r{i}' for i in range(arity))

    instr = parse_line(f'{mnemonic} {operands}')

    assert instr.op is op
    assert len(instr.params) == arity


def test_msg_mixed_and_empty():
    instr = parse_line("msg a, '^', 10, ' = ', c")
    assert [p.kind for p in instr.params] == [
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.STRING,
        TokenKind.IDENTIFIER
    ]

    assert parse_line('msg').params == ()


def test_trailing_comma_is_tolerated():
    assert len(parse_line('mov a, 5,').params) == 2


def test_empty_tokens():
    with pytest.raises(e.EmptyInstruction):
        parse([], 1)


@pytest.mark.parametrize('text', ['5 a', "'mov'", ', mov', ': x'])
def test_missing_instruction(text):
    with pytest.raises(e.MissingInstruction) as info:
        parse_line(text, 2)

    assert str(info.value) == 'No instruction given Line: 2'


@pytest.mark.parametrize('text', ['foo a', 'Mov a, 1', 'bar', 'x: y', 'x ::'])
def test_unknown_instruction(text):
    with pytest.raises(e.UnknownInstruction):
        parse_line(text)


@pytest.mark.parametrize('text', ['end:', 'sub:', 'call:'])
def test_label_named_like_mnemonic(text):
    with pytest.raises(e.UnexpectedToken) as info:
        parse_line(text, 4)

    assert info.value.text == ':'
    assert info.value.line == 4


def test_wrong_argument_count():
    with pytest.raises(e.WrongArgumentCount) as info:
        parse_line('mov a', 3)

    assert info.value.mnemonic == 'mov'
    assert info.value.expected == 2
    assert info.value.got == 1
    assert str(info.value) == "'mov' instruction requires 2 arguments, given 1. Line: 3"


@pytest.mark.parametrize('text, expected, got', [
    ('ret a', 0, 1),
    ('end 1', 0, 1),
    ('inc', 1, 0),
    ('jmp a, b', 1, 2),
    ('cmp 1', 2, 1),
    ('div a, 1, 2', 2, 3),
])
def test_arities(text, expected, got):
    with pytest.raises(e.WrongArgumentCount) as info:
        parse_line(text)

    assert (info.value.expected, info.value.got) == (expected, got)


@pytest.mark.parametrize('text', [
    'mov 5, a',
    "mov a, 'x'",
    'inc 3',
    "add a, 'b'",
    "cmp 'a', 1",
    'jmp 10',
    "call 'f'",
])
def test_invalid_argument_type(text):
    with pytest.raises(e.InvalidArgumentType) as info:
        parse_line(text, 9)

    assert info.value.mnemonic == text.split()[0]
    assert info.value.line == 9


def test_cmp_accepts_literals():
    assert parse_line('cmp 1, -2').op is Op.CMP


def test_expected_comma():
    with pytest.raises(e.ExpectedComma) as info:
        parse_line('mov a 5', 5)

    assert info.value.text == '5'
    assert str(info.value) == "Error parsing '5', coma ',' expected! Line: 5"


@pytest.mark.parametrize('text, error, found', [
    ('mov a, , 5', e.UnexpectedToken, ','),
    ('msg ,', e.UnexpectedToken, ','),
    ('msg a, :', e.UnexpectedToken, ':'),
    ('mov a: 5', e.ExpectedComma, ':'),
    ("msg 'x' a", e.ExpectedComma, 'a'),
])
def test_misplaced_separators(text, error, found):
    with pytest.raises(error) as info:
        parse_line(text)

    assert type(info.value) is error
    assert info.value.text == found


def test_unexpected_separator():
    with pytest.raises(e.UnexpectedToken) as info:
        parse_line('mov a, , 5')

    assert info.value.text == ','
