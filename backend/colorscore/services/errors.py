"""
ColorScore error taxonomy.

Only two kinds of failure reach the HTTP boundary: missing input (a client
error) and a generic processing failure. Decode problems are raised as
``DecodeError`` inside the pipeline and folded into ``ProcessingError`` by the
orchestrator.
"""


class AnalysisError(Exception):
    """Base class for all analysis failures."""
    pass


class MissingInputError(AnalysisError):
    """No image was provided, or the upload was empty."""
    pass


class FileTooLargeError(AnalysisError):
    """Uploaded image exceeds the configured size limit."""
    pass


class DecodeError(AnalysisError):
    """Bytes could not be interpreted as an image."""
    pass


class InvalidClusterCountError(AnalysisError, ValueError):
    """Requested number of dominant colors is negative."""
    pass


class ProcessingError(AnalysisError):
    """Any failure while decoding, clustering or scoring."""

    def __init__(self, message: str = "Failed to process image.", request_id: str = None):
        super().__init__(message)
        self.request_id = request_id
