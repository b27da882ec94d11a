class PrintableBinaryError(Exception):
    """Base class for all codec errors."""
    def __init__(self, message="Printable binary codec failure"):
        super().__init__(message)


class TableIntegrityError(PrintableBinaryError):
    """Raised when the symbol table is incomplete or ambiguous."""
    def __init__(self, message="Symbol table integrity violated"):
        super().__init__(message)


class UsageError(PrintableBinaryError):
    """Raised for invalid or conflicting command-line usage."""
    def __init__(self, message="Invalid usage"):
        super().__init__(message)


class CollaboratorError(PrintableBinaryError):
    """Raised when a required external disassembler is unavailable."""
    def __init__(self, message="External tool unavailable"):
        super().__init__(message)
