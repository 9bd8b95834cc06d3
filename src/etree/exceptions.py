class ExportError(Exception):
    """
    Exception raised when the tabular export cannot be written.

    The rows collected during traversal are left untouched; only the file on disk
    may be missing or incomplete.

    Attributes:
        file_path (str): Path of the export file that could not be written.

    Example:
        >>> error = ExportError("out.tsv", "Permission denied")
        >>> str(error)
        'Could not write to file out.tsv: Permission denied'
    """

    def __init__(self, file_path: str, reason: str) -> None:
        """
        Initialize the exception with the export path and the underlying reason.

        Args:
            file_path (str): Path of the export file.
            reason (str): Human-readable cause, usually the OS error message.
        """
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Could not write to file {file_path}: {reason}")
