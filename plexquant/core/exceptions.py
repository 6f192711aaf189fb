"""
Exceptions raised by the quantification core.
"""


class KeyNotFound(KeyError):
    """A row entity was requested from a QuantMatrix that does not contain it."""


class ConfigurationMismatch(KeyError):
    """A file observed in the spectral matches has no entry in the experimental design."""

    def __init__(self, file_name: str):
        super().__init__(file_name)
        self.file_name = file_name

    def __str__(self) -> str:
        return f"File '{self.file_name}' is not described in the experimental design"
