"""Errors raised at the registry and driver boundaries.

Generators themselves never raise once constructed.
"""


class PrngSeqError(Exception):
    """Base class for prngseq errors."""


class UnknownGeneratorError(PrngSeqError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown generator: {name}")


class OutputUnopenableError(PrngSeqError, OSError):
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        message = f"Cannot open output file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class OutputWriteError(PrngSeqError, OSError):
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        message = f"Failed writing output file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
