import struct
import logging as lg
from typing import Callable, Dict, List

from miniasm.common.conf import WORD_MASK, INT_MIN, INT_MAX
from miniasm.common.ops import Op, Instruction, Parameter, TokenKind
from miniasm.asm.asm import Program
import miniasm.common.errors as e


class Halt(Exception):
    pass


def wrap(value: int) -> int:
    (word,) = struct.unpack('>i', struct.pack('>I', value & WORD_MASK))
    return word


def truncdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class CPU():
    ip: int                 # Instruction pointer, index into the program
    flag: int               # Last 'cmp' difference
    regs: Dict[str, int]    # Named registers, declared by 'mov'
    stack: List[int]        # Indices of 'call' instructions
    output: List[str]

    def __init__(self, program: Program):
        self.program = program  # Ref. to program

        self.ip = 0
        self.flag = 0
        self.regs = dict()
        self.stack = []
        self.output = []

    # - Helpers - #

    def debug_dump(self, instr: Instruction):
        state = [f'IP:{self.ip}', f'FLAG:{self.flag}', f'SD:{len(self.stack)}']
        state.extend([f'{name}:{value}' for name, value in self.regs.items()])
        lg.debug(f'{instr} | ' + ' '.join(state))

    def result(self) -> str:
        return ''.join(self.output)

    def get_reg(self, param: Parameter, line: int) -> int:
        name = param.text

        if name not in self.regs:
            raise e.UndefinedRegister(name, line)

        return self.regs[name]

    def set_reg(self, param: Parameter, value: int):
        self.regs[param.text] = wrap(value)

    def resolve(self, param: Parameter, line: int) -> int:
        if param.kind is TokenKind.NUMBER:
            try:
                value = int(param.text)
            except ValueError:
                raise e.InvalidNumber(param.text, line) from None

            if value < INT_MIN or value > INT_MAX:
                raise e.InvalidNumber(param.text, line)

            return value

        return self.get_reg(param, line)

    def label_target(self, param: Parameter, line: int) -> int:
        name = param.text

        if name not in self.program.labels:
            raise e.UndefinedLabel(name, line)

        return self.program.labels[name]

    def arithm_pair(self, instr: Instruction, op: Callable[[int, int], int]):
        (dst, src) = instr.params
        a = self.get_reg(dst, instr.line)
        b = self.resolve(src, instr.line)
        self.set_reg(dst, op(a, b))

    def step_reg(self, instr: Instruction, delta: int):
        (dst,) = instr.params
        self.set_reg(dst, self.get_reg(dst, instr.line) + delta)

    def jump_if(self, instr: Instruction, cond: Callable[[int], bool]):
        if cond(self.flag):
            self.ip = self.label_target(instr.params[0], instr.line)

    # - Operations - #

    def mov(self, instr: Instruction):
        (dst, src) = instr.params
        self.set_reg(dst, self.resolve(src, instr.line))

    def inc(self, instr: Instruction):
        self.step_reg(instr, 1)

    def dec(self, instr: Instruction):
        self.step_reg(instr, -1)

    def add(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: a + b)

    def sub(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: a - b)

    def mul(self, instr: Instruction):
        self.arithm_pair(instr, lambda a, b: a * b)

    def div(self, instr: Instruction):
        (dst, src) = instr.params
        divisor = self.resolve(src, instr.line)

        if divisor == 0:
            raise e.DivisionByZero(instr.line)

        self.set_reg(dst, truncdiv(self.get_reg(dst, instr.line), divisor))

    def cmp(self, instr: Instruction):
        (a, b) = instr.params
        self.flag = self.resolve(a, instr.line) - self.resolve(b, instr.line)

    def jmp(self, instr: Instruction):
        self.jump_if(instr, lambda _: True)

    def jne(self, instr: Instruction):
        self.jump_if(instr, lambda f: f != 0)

    def je(self, instr: Instruction):
        self.jump_if(instr, lambda f: f == 0)

    def jge(self, instr: Instruction):
        self.jump_if(instr, lambda f: f >= 0)

    def jg(self, instr: Instruction):
        self.jump_if(instr, lambda f: f > 0)

    def jle(self, instr: Instruction):
        self.jump_if(instr, lambda f: f <= 0)

    def jl(self, instr: Instruction):
        self.jump_if(instr, lambda f: f < 0)

    def call(self, instr: Instruction):
        # Return point is the 'call' itself, the step advance skips over it
        target = self.label_target(instr.params[0], instr.line)
        self.stack.append(self.ip)
        self.ip = target

    def ret(self, instr: Instruction):
        if not self.stack:
            raise e.EmptyCallStack(instr.line)

        self.ip = self.stack.pop()

    def msg(self, instr: Instruction):
        for param in instr.params:
            if param.kind is TokenKind.STRING:
                self.output.append(param.text)
            else:
                self.output.append(str(self.resolve(param, instr.line)))

    def end(self, instr: Instruction):
        raise Halt()

    def label(self, instr: Instruction):
        pass

    HANDLERS = {
        Op.MOV: mov,
        Op.INC: inc,
        Op.DEC: dec,

        Op.ADD: add,
        Op.SUB: sub,
        Op.MUL: mul,
        Op.DIV: div,

        Op.CMP: cmp,
        Op.JMP: jmp,
        Op.JNE: jne,
        Op.JE: je,
        Op.JGE: jge,
        Op.JG: jg,
        Op.JLE: jle,
        Op.JL: jl,
        Op.CALL: call,
        Op.RET: ret,

        Op.MSG: msg,
        Op.END: end,

        Op.LABEL: label
    }

    # -- Implementation -- #

    def running(self) -> bool:
        return 0 <= self.ip < len(self.program)

    def exec_next(self, trace: bool = False):
        instr = self.program[self.ip]

        if trace:
            self.debug_dump(instr)

        handler = self.HANDLERS[instr.op]
        handler(self, instr)
        self.ip += 1
