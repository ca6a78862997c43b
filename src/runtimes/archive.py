"""Download-and-unpack helpers shared by the runtime installers.

Installers unpack into a ``staging_dir`` inside the versions directory and
rename the finished tree to ``v<version>`` last, so a failed download or a
corrupt archive never leaves a directory that looks installed.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
import tarfile
import tempfile
import zipfile
import zlib
from contextlib import contextmanager
from typing import Iterator

from common.http_client import download_file
from errors import DownloadError

logger = logging.getLogger(__name__)

_STAGING_PREFIX = ".staging-"


def _print_progress(url: str):
    def _report(received: int, total):
        if total:
            sys.stdout.write(f"\rDownloading {url}: {received * 100 // total}%")
            sys.stdout.flush()
    return _report


def fetch_archive(url: str, workdir: str) -> str:
    """Download ``url`` into ``workdir`` with a progress line."""
    path = download_file(url, workdir, on_progress=_print_progress(url))
    sys.stdout.write(f"\rDownload {url} completed\n")
    return path


def extract_archive(archive_path: str, destination: str) -> None:
    """Unpack a ``.zip`` or ``.tar.*`` archive into ``destination``.

    Zip members keep their Unix permission bits so executables stay runnable.

    Raises:
        DownloadError: The archive is corrupt or truncated.
    """
    os.makedirs(destination, exist_ok=True)
    try:
        if archive_path.endswith(".zip"):
            with zipfile.ZipFile(archive_path) as zf:
                for info in zf.infolist():
                    extracted = zf.extract(info, destination)
                    mode = (info.external_attr >> 16) & 0o777
                    if mode:
                        os.chmod(extracted, mode)
        else:
            with tarfile.open(archive_path) as tf:
                tf.extractall(destination, filter="data")
    except (zipfile.BadZipFile, tarfile.TarError, zlib.error, EOFError) as exc:
        raise DownloadError(
            f"Failed to unpack {os.path.basename(archive_path)}: {exc}"
        ) from exc


def download_and_extract(url: str, destination: str) -> None:
    """Fetch ``url`` into a private temp directory and unpack it into ``destination``.

    The temp directory and the archive in it are removed whatever happens.
    """
    workdir = tempfile.mkdtemp(prefix="jrm-download-")
    try:
        archive_path = fetch_archive(url, workdir)
        extract_archive(archive_path, destination)
    finally:
        shutil.rmtree(workdir)
    logger.debug("Extracted %s into %s", url, destination)


@contextmanager
def staging_dir(versions_dir: str) -> Iterator[str]:
    """Scratch directory inside ``versions_dir``, removed on exit.

    Its name never parses as ``v<semver>``, so the store ignores it while an
    install is in progress.
    """
    path = tempfile.mkdtemp(prefix=_STAGING_PREFIX, dir=versions_dir)
    try:
        yield path
    finally:
        shutil.rmtree(path)
