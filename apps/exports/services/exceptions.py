"""Domain exceptions for exports app."""


class ExportServiceError(Exception):
    """Base exception for all export service errors."""
    pass


class GitHubExportError(ExportServiceError):
    """
    The GitHub contents API rejected the export or could not be reached.

    Attributes:
        status_code: Upstream HTTP status, or 502 when no response arrived
        details: Upstream JSON body, or a dict describing the network failure
    """

    def __init__(self, message, *, status_code, details):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
