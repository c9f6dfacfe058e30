WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
INT_MIN = -(1 << (WORD_BITS - 1))
INT_MAX = (1 << (WORD_BITS - 1)) - 1

FAILURE_SENTINEL = '-1'   # Result of a program that never reaches 'end'

COMMENT_CHAR = ';'
BLANK_CHARS = ' \t'
LINE_SEPARATOR = '\n'


class RunSettings:
    verbose: bool
    trace: bool

    def __init__(self):
        self.verbose = False
        self.trace = False

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        return self
