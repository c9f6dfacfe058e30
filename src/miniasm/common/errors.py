''' Interpreter errors '''


class AsmError(Exception):
    line: int | None

    def __init__(self, message: str, line: int | None = None):
        self.line = line

        if line is not None:
            message = f'{message} Line: {line}'

        super().__init__(message)


# Tokenizer

class UnterminatedString(AsmError):
    def __init__(self, line: int):
        super().__init__('Unmatched "\'"', line)


class UnknownCharacter(AsmError):
    char: str

    def __init__(self, char: str, line: int):
        self.char = char
        super().__init__(f"Unknown token passed: '{char}'", line)


# Parser

class EmptyInstruction(AsmError):
    def __init__(self, line: int):
        super().__init__('Nothing to parse! This error shouldn\'t happen, Implementation error!', line)


class MissingInstruction(AsmError):
    def __init__(self, line: int):
        super().__init__('No instruction given', line)


class UnknownInstruction(AsmError):
    mnemonic: str

    def __init__(self, mnemonic: str, line: int):
        self.mnemonic = mnemonic
        super().__init__(f"Unknown instruction '{mnemonic}'", line)


class WrongArgumentCount(AsmError):
    mnemonic: str
    expected: int
    got: int

    def __init__(self, mnemonic: str, expected: int, got: int, line: int):
        self.mnemonic = mnemonic
        self.expected = expected
        self.got = got
        super().__init__(
            f"'{mnemonic}' instruction requires {expected} arguments, given {got}.",
            line
        )


class InvalidArgumentType(AsmError):
    mnemonic: str

    def __init__(self, mnemonic: str, line: int):
        self.mnemonic = mnemonic
        super().__init__(f"Invalid arguments given to '{mnemonic}' instruction.", line)


class ExpectedComma(AsmError):
    text: str

    def __init__(self, text: str, line: int):
        self.text = text
        super().__init__(f"Error parsing '{text}', coma ',' expected!", line)


class UnexpectedToken(AsmError):
    text: str

    def __init__(self, text: str, line: int):
        self.text = text
        super().__init__(f"Error parsing '{text}'", line)


# Builder

class DuplicateLabel(AsmError):
    name: str

    def __init__(self, name: str, line: int):
        self.name = name
        super().__init__(f"Label redeclaration error '{name}'", line)


# Runtime

class UndefinedRegister(AsmError):
    name: str

    def __init__(self, name: str, line: int | None = None):
        self.name = name
        super().__init__(f'Unknown register {name} accessed.', line)


class UndefinedLabel(AsmError):
    name: str

    def __init__(self, name: str, line: int | None = None):
        self.name = name
        super().__init__(f'Unknown label {name} accessed.', line)


class DivisionByZero(AsmError):
    def __init__(self, line: int | None = None):
        super().__init__('Division by Zero', line)


class EmptyCallStack(AsmError):
    def __init__(self, line: int | None = None):
        super().__init__('Nowhere to return!', line)


class InvalidNumber(AsmError):
    text: str

    def __init__(self, text: str, line: int | None = None):
        self.text = text
        super().__init__(f"Unable to convert '{text}' to integer!", line)
