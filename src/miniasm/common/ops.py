from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, FrozenSet


class TokenKind(Enum):
    IDENTIFIER = 'identifier'
    NUMBER = 'number'
    STRING = 'string'
    COMMA = 'comma'
    COLON = 'colon'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


# Tokens used as instruction operands
Parameter = Token


class Op(Enum):
    # Registers
    MOV = 'mov'     # V2 -> R1 (declares R1)
    INC = 'inc'     # R1 + 1 -> R1
    DEC = 'dec'     # R1 - 1 -> R1

    # Arithmetic
    ADD = 'add'     # R1 + V2 -> R1
    SUB = 'sub'     # R1 - V2 -> R1
    MUL = 'mul'     # R1 * V2 -> R1
    DIV = 'div'     # R1 / V2 -> R1, truncated

    # Flow
    CMP = 'cmp'     # V1 - V2 -> flag
    JMP = 'jmp'     # goto L1
    JNE = 'jne'     # if flag != 0 goto L1
    JE = 'je'       # if flag == 0 goto L1
    JGE = 'jge'     # if flag >= 0 goto L1
    JG = 'jg'       # if flag > 0 goto L1
    JLE = 'jle'     # if flag <= 0 goto L1
    JL = 'jl'       # if flag < 0 goto L1
    CALL = 'call'   # push IP; goto L1
    RET = 'ret'     # pop IP

    # Output
    MSG = 'msg'     # T1..Tn -> output
    END = 'end'     # halt, output is the result

    # Pseudo
    LABEL = 'label'  # L1: (no-op)


# Mnemonic -> instruction kind. Labels are recognised by shape, not by name.
MNEMONICS: Dict[str, Op] = {op.value: op for op in Op if op is not Op.LABEL}

# Operand kinds
REG: FrozenSet[TokenKind] = frozenset([TokenKind.IDENTIFIER])
VALUE: FrozenSet[TokenKind] = frozenset([TokenKind.IDENTIFIER, TokenKind.NUMBER])
TEXT: FrozenSet[TokenKind] = frozenset([TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.STRING])
LBL = REG

# Fixed signatures. MSG is variadic, each operand being TEXT.
SIGNATURES: Dict[Op, Tuple[FrozenSet[TokenKind], ...]] = {
    Op.MOV: (REG, VALUE),
    Op.INC: (REG,),
    Op.DEC: (REG,),
    Op.ADD: (REG, VALUE),
    Op.SUB: (REG, VALUE),
    Op.MUL: (REG, VALUE),
    Op.DIV: (REG, VALUE),
    Op.CMP: (VALUE, VALUE),
    Op.JMP: (LBL,),
    Op.JNE: (LBL,),
    Op.JE: (LBL,),
    Op.JGE: (LBL,),
    Op.JG: (LBL,),
    Op.JLE: (LBL,),
    Op.JL: (LBL,),
    Op.CALL: (LBL,),
    Op.RET: (),
    Op.END: (),
    Op.LABEL: (LBL,),
}

VARIADIC: Dict[Op, FrozenSet[TokenKind]] = {
    Op.MSG: TEXT,
}


@dataclass(frozen=True)
class Instruction:
    op: Op
    params: Tuple[Parameter, ...]
    line: int

    def __str__(self) -> str:
        if self.op is Op.LABEL:
            return f'{self.params[0].text}:'

        operands = ', '.join(
            f"'{p.text}'" if p.kind is TokenKind.STRING else p.text
            for p in self.params
        )

        return f'{self.op.value} {operands}'.rstrip()
