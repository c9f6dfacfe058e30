# type: ignore
import pytest

import miniasm.asm.asm as asm
import miniasm.runtime.cpu as cpu


@pytest.fixture
def make_cpu():
    def factory(source: str) -> cpu.CPU:
        return cpu.CPU(asm.build(source))

    yield factory


@pytest.fixture
def branch_source():
    def factory(a: int, b: int, jump: str) -> str:
        return '\n'.join([
            f'mov a, {a}',
            f'mov b, {b}',
            'cmp a, b',
            f'{jump} taken',
            "msg 'no'",
            'end',
            'taken:',
            "msg 'yes'",
            'end',
        ])

    yield factory
