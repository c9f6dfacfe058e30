import logging as lg

from miniasm.common.conf import FAILURE_SENTINEL, RunSettings
from miniasm.asm.asm import Program, build
import miniasm.runtime.cpu as cpu


def execute(program: Program, settings: RunSettings | None = None) -> str:
    if settings is None:
        settings = RunSettings()

    proc = cpu.CPU(program)

    try:
        while proc.running():
            proc.exec_next(trace=settings.trace)

    except cpu.Halt:
        lg.info('Execution halted gracefully')
        return proc.result()

    lg.info('Execution ran past the last instruction without end')
    return FAILURE_SENTINEL


def interpret(source: str, settings: RunSettings | None = None) -> str:
    program = build(source)

    if settings is not None and settings.verbose:
        lg.debug('Program listing:\n' + program.listing())

    return execute(program, settings)
