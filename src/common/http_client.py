"""Shared HTTP helpers used by the runtime clients.

Encapsulates common request/timeout error handling so the per-runtime modules
avoid duplicating try/except blocks. Requests are made exactly once: listing
failures come back as an empty result, download failures raise DownloadError.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import urlparse

import requests

from constants import Constants
from errors import DownloadError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, Optional[int]], None]


def github_headers() -> Dict[str, str]:
    """Headers for GitHub API calls; adds a token when GITHUB_TOKEN is set."""
    headers = {"Accept": "application/vnd.github+json"}
    token = os.environ.get(Constants.ENV_GITHUB_TOKEN)
    if token and token.strip():
        headers["Authorization"] = f"Bearer {token.strip()}"
    return headers


def robust_get(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> Tuple[int, Dict[str, str], str]:
    """Perform a single GET request with timeout handling and DEBUG traces.

    Returns:
        Tuple of (status_code, headers_dict, body_text). Connection failures
        and timeouts are reported as status 0 with an empty body.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                )
            )
        try:
            response = requests.get(url, timeout=Constants.REQUEST_TIMEOUT, headers=headers)
        except requests.Timeout:
            logger.warning(
                "Request to %s timed out after %s seconds",
                safe_target,
                Constants.REQUEST_TIMEOUT,
            )
            return 0, {}, ""
        except requests.RequestException as exc:  # includes ConnectionError
            logger.warning("Request to %s failed: %s", safe_target, exc)
            return 0, {}, ""

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                outcome="success" if response.ok else "error_status",
                status_code=response.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
            )
        )
    return response.status_code, dict(response.headers), response.text


def get_json(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
) -> Tuple[int, Dict[str, str], Optional[Any]]:
    """GET ``url`` and decode a JSON body.

    The decoded value is only returned for a 200 response; anything else,
    including an undecodable 200 body, yields None alongside the status.
    """
    status_code, response_headers, text = robust_get(url, headers=headers)
    if status_code != 200 or not text:
        return status_code, response_headers, None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Response from %s is not valid JSON: %s", safe_url(url), exc)
        data = None
    return status_code, response_headers, data


def download_file(
    url: str,
    destination_dir: str,
    *,
    on_progress: Optional[ProgressCallback] = None,
) -> str:
    """Stream ``url`` into ``destination_dir`` and return the written path.

    The file name is the last path segment of the URL.

    Raises:
        DownloadError: On connection failures or non-2xx responses. A
            partially written file is removed first.
    """
    safe_target = safe_url(url)
    file_name = os.path.basename(urlparse(url).path)
    output_path = os.path.join(destination_dir, file_name)
    with Timer() as t:
        try:
            with requests.get(url, stream=True, timeout=Constants.REQUEST_TIMEOUT) as response:
                if not response.ok:
                    raise DownloadError(
                        f"Failed to fetch {safe_target}. Status: {response.status_code}."
                    )
                length = response.headers.get("content-length")
                total = int(length) if length and length.isdigit() else None
                received = 0
                with open(output_path, "wb") as fh:
                    for chunk in response.iter_content(chunk_size=Constants.DOWNLOAD_CHUNK_SIZE):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        received += len(chunk)
                        if on_progress is not None:
                            on_progress(received, total)
        except requests.RequestException as exc:
            _discard_partial(output_path)
            raise DownloadError(f"Failed to fetch {safe_target}: {exc}") from exc
        except (DownloadError, OSError):
            _discard_partial(output_path)
            raise

    if is_debug_enabled(logger):
        logger.debug(
            "Download complete",
            extra=extra_context(
                event="download",
                component="http_client",
                action="GET",
                outcome="success",
                duration_ms=t.duration_ms(),
                target=safe_target,
            )
        )
    return output_path


def _discard_partial(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)
        logger.debug("Removed partial download %s", path)
