"""
GitHub export - push a JSON snapshot of the ledger to a repository.

Every export writes a new timestamped file through the GitHub contents API
in a single PUT request. There is no retry and no diffing against earlier
exports.

Example:
    >>> result = push_export_to_github(owner='marie', repo='pichacka-data', token='ghp_...')
    >>> result['url']
    'https://github.com/marie/pichacka-data/blob/main/export_2026-10-16T08-30-00-000Z.json'
"""

import base64
import json
import logging
from datetime import datetime, timezone as dt_timezone
from typing import Optional

import requests
from django.conf import settings
from django.utils import timezone
from rest_framework.utils.encoders import JSONEncoder

from apps.debts.serializers import DebtSerializer
from apps.debts.services import get_all_debts
from apps.finances.serializers import FinanceSerializer
from apps.finances.services import get_all_finances
from apps.worklogs.serializers import WorkLogSerializer
from apps.worklogs.services import get_all_work_logs
from apps.worklogs.services.periods import day_label
from .exceptions import GitHubExportError

logger = logging.getLogger(__name__)


def utc_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    stamp = moment.astimezone(dt_timezone.utc).isoformat(timespec='milliseconds')
    return stamp.replace('+00:00', 'Z')


def export_filename(moment: datetime) -> str:
    """export_<timestamp>.json with ':' and '.' replaced by '-'."""
    stamp = utc_timestamp(moment).replace(':', '-').replace('.', '-')
    return f"export_{stamp}.json"


def default_commit_message(moment: datetime) -> str:
    return f"{settings.GITHUB_EXPORT_DEFAULT_MESSAGE} - {day_label(timezone.localdate(moment))}"


def build_export_payload(*, exported_at: datetime) -> dict:
    """
    Snapshot of work logs, finances and debts.

    Each collection uses the same representation as its list endpoint.
    """
    return {
        'exportDate': utc_timestamp(exported_at),
        'workLogs': WorkLogSerializer(get_all_work_logs(), many=True).data,
        'finances': FinanceSerializer(get_all_finances(), many=True).data,
        'debts': DebtSerializer(get_all_debts(), many=True).data,
    }


def render_export(payload: dict) -> str:
    """Pretty-printed JSON document as stored in the repository."""
    return json.dumps(payload, cls=JSONEncoder, indent=2, ensure_ascii=False)


def encode_content(document: str) -> str:
    return base64.b64encode(document.encode('utf-8')).decode('ascii')


def push_export_to_github(
    *,
    owner: str,
    repo: str,
    token: str,
    message: Optional[str] = None
) -> dict:
    """
    Export the ledger to {owner}/{repo} as a new file.

    Args:
        owner: Repository owner (user or organisation)
        repo: Repository name
        token: Personal access token with contents write access
        message: Commit message; defaults to GITHUB_EXPORT_DEFAULT_MESSAGE
            followed by today's date

    Returns:
        Dictionary with filename and url (html_url of the created file, or None)

    Raises:
        GitHubExportError: If GitHub answers with an error status or cannot
            be reached
    """
    now = timezone.now()
    filename = export_filename(now)
    document = render_export(build_export_payload(exported_at=now))

    url = f"{settings.GITHUB_API_URL.rstrip('/')}/repos/{owner}/{repo}/contents/{filename}"
    headers = {
        'Authorization': f'token {token}',
        'Accept': 'application/vnd.github.v3+json',
    }
    body = {
        'message': message or default_commit_message(now),
        'content': encode_content(document),
        'branch': settings.GITHUB_EXPORT_BRANCH,
    }

    try:
        response = requests.put(
            url,
            json=body,
            headers=headers,
            timeout=settings.GITHUB_EXPORT_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.warning("GitHub export to %s/%s failed: %s", owner, repo, e)
        raise GitHubExportError(
            "GitHub could not be reached",
            status_code=502,
            details={'message': str(e)},
        )

    try:
        result = response.json() if response.content else {}
    except ValueError:
        result = {'message': response.text}

    if not response.ok:
        logger.warning(
            "GitHub export to %s/%s rejected with %s", owner, repo, response.status_code
        )
        raise GitHubExportError(
            "GitHub rejected the export",
            status_code=response.status_code,
            details=result,
        )

    content = result.get('content') if isinstance(result, dict) else None
    content = content if isinstance(content, dict) else {}
    logger.info("Exported ledger to %s/%s as %s", owner, repo, filename)
    return {
        'filename': filename,
        'url': content.get('html_url'),
    }
