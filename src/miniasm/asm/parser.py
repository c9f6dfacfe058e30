''' Instruction parser '''

from typing import List, Sequence, FrozenSet

from miniasm.common.ops import Token, TokenKind, Parameter, Instruction, Op
from miniasm.common.ops import MNEMONICS, SIGNATURES, VARIADIC, TEXT
import miniasm.common.errors as e


def split_parameters(tokens: Sequence[Token], lineno: int) -> List[Parameter]:
    params: List[Parameter] = []
    i = 0

    while i < len(tokens):
        tok = tokens[i]

        if tok.kind not in TEXT:
            raise e.UnexpectedToken(tok.text, lineno)

        params.append(tok)

        if i + 1 == len(tokens):
            break

        follower = tokens[i + 1]

        if follower.kind is not TokenKind.COMMA:
            raise e.ExpectedComma(follower.text, lineno)

        i += 2

    return params


def check_kinds(
    mnemonic: str,
    params: Sequence[Parameter],
    kinds: Sequence[FrozenSet[TokenKind]],
    lineno: int
):
    for param, allowed in zip(params, kinds):
        if param.kind not in allowed:
            raise e.InvalidArgumentType(mnemonic, lineno)


def check_signature(op: Op, params: Sequence[Parameter], lineno: int):
    mnemonic = op.value

    if op in VARIADIC:
        allowed = VARIADIC[op]
        check_kinds(mnemonic, params, [allowed] * len(params), lineno)
        return

    signature = SIGNATURES[op]

    if len(params) != len(signature):
        raise e.WrongArgumentCount(mnemonic, len(signature), len(params), lineno)

    check_kinds(mnemonic, params, signature, lineno)


def parse(tokens: Sequence[Token], lineno: int) -> Instruction:
    if not tokens:
        raise e.EmptyInstruction(lineno)

    head = tokens[0]

    if head.kind is not TokenKind.IDENTIFIER:
        raise e.MissingInstruction(lineno)

    op = MNEMONICS.get(head.text)

    if op is None:
        # <name>:
        if len(tokens) == 2 and tokens[1].kind is TokenKind.COLON:
            return Instruction(Op.LABEL, (head,), lineno)

        raise e.UnknownInstruction(head.text, lineno)

    params = split_parameters(tokens[1:], lineno)
    check_signature(op, params, lineno)
    return Instruction(op, tuple(params), lineno)
