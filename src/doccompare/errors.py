"""Error types raised by ingestion and the comparison engine"""


class DocCompareError(Exception):
    """Base class for errors surfaced to callers; `code` is a stable machine-readable tag."""
    code: str = "DOCCOMPARE_ERROR"


class MissingInputError(DocCompareError):
    """One or both input documents were not provided (empty text is still a valid input)."""
    code = "MISSING_DOCUMENTS"


class AlignmentError(DocCompareError):
    """The line aligner failed or returned segments that do not reconstruct both inputs."""
    code = "DIFF_COMPUTATION_ERROR"


class ParseError(DocCompareError):
    code = "PARSE_ERROR"

    def __init__(self, message: str, file_type: str):
        super().__init__(message)
        self.file_type = file_type


class UploadError(DocCompareError):
    """A file was rejected before parsing (unsupported type or over the size limit)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
