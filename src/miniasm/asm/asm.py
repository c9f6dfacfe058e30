import logging as lg
from typing import Dict, List

from miniasm.common.conf import LINE_SEPARATOR
from miniasm.common.ops import Instruction, Op
import miniasm.common.errors as e
import miniasm.asm.grammar as grammar
import miniasm.asm.parser as parser


class Program:
    instructions: List[Instruction]
    labels: Dict[str, int]  # Label -> index of its own (no-op) instruction

    def __init__(self):
        self.instructions = []
        self.labels = dict()

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def add_label(self, name: str, lineno: int):
        if name in self.labels:
            raise e.DuplicateLabel(name, lineno)

        lg.debug(f'New label {name} at {len(self.instructions)}')
        self.labels[name] = len(self.instructions)

    def append(self, instruction: Instruction):
        if instruction.op is Op.LABEL:
            self.add_label(instruction.params[0].text, instruction.line)

        self.instructions.append(instruction)

    def listing(self) -> str:
        return '\n'.join(
            f'{index:4} {instr.line:4}  {instr}'
            for index, instr in enumerate(self.instructions)
        )


def split_lines(source: str) -> List[str]:
    return source.split(LINE_SEPARATOR)


def build(source: str) -> Program:
    program = Program()

    for lineno, text in enumerate(split_lines(source), start=1):
        tokens = grammar.tokenize(text, lineno)

        if not tokens:
            continue

        program.append(parser.parse(tokens, lineno))

    lg.debug(f'Built {len(program)} instructions, {len(program.labels)} labels')
    return program
