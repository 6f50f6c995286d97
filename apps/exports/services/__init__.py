"""Services for exports business logic."""

from .exceptions import (
    ExportServiceError,
    GitHubExportError,
)
from .github_export import (
    build_export_payload,
    render_export,
    export_filename,
    push_export_to_github,
)

__all__ = [
    'ExportServiceError',
    'GitHubExportError',
    'build_export_payload',
    'render_export',
    'export_filename',
    'push_export_to_github',
]
