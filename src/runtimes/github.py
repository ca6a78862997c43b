"""GitHub tag listing shared by runtimes that publish releases on GitHub."""

from __future__ import annotations

import logging
from typing import List, Optional

from constants import Constants
from common.http_client import get_json, github_headers

logger = logging.getLogger(__name__)


def list_tag_names(repo: str, api_base: Optional[str] = None) -> List[str]:
    """All tag names of ``owner/name``, following pagination.

    Stops at the first failed or short page; nothing is retried.
    """
    base = (api_base or Constants.GITHUB_API_BASE).rstrip("/")
    per_page = Constants.GITHUB_TAGS_PER_PAGE
    names: List[str] = []
    page = 1
    while True:
        url = f"{base}/repos/{repo}/tags?per_page={per_page}&page={page}"
        status_code, _, data = get_json(url, headers=github_headers())
        if status_code != 200:
            if not names:
                logger.warning("Could not list tags of %s (status %s)", repo, status_code)
            break
        if not isinstance(data, list) or not data:
            break
        names.extend(
            tag["name"] for tag in data
            if isinstance(tag, dict) and isinstance(tag.get("name"), str)
        )
        if len(data) < per_page:
            break
        page += 1
    return names
