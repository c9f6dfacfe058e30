import sys
import logging as lg
from typing import Tuple

import click

from miniasm.common.conf import RunSettings
from miniasm.common.errors import AsmError
from miniasm.runtime.emulator import interpret
from miniasm.tools.samples import SAMPLES


EXIT_OK = 0
EXIT_ASM_ERROR = 1


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Dump machine state before each instruction')
@click.option(
    '-s', '--sample', 'samples',
    multiple=True,
    type=click.Choice(sorted(SAMPLES.keys())),
    help='Sample program to run (default: all)'
)
def run(verbose: bool, trace: bool, samples: Tuple[str, ...]):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('MINIASM')

    settings = RunSettings().update(verbose=verbose, trace=trace)

    for name in samples or sorted(SAMPLES.keys()):
        lg.debug(f'Running sample {name}')

        try:
            click.echo(interpret(SAMPLES[name], settings))

        except AsmError as e:
            lg.error(f'Sample {name} failed: {e}')
            sys.exit(EXIT_ASM_ERROR)

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    run()
