"""Resolution of a remote package's complete-archive URL.

Repository sources may list archives by a URL relative to the source's own
location. This module turns such a reference into an absolute URL that a
downloader can fetch.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from repodeps.core.dependency.graph import Package
from repodeps.core.diagnostics import DiagnosticsSink, LoggingDiagnostics


def _is_absolute(url: str) -> bool:
    parts = urlsplit(url)
    if not parts.scheme:
        return False
    # file: URLs legitimately have no network location.
    return bool(parts.netloc) or parts.scheme == "file"


def resolve_archive_url(
    package: Package, diagnostics: DiagnosticsSink | None = None
) -> str | None:
    """Return the absolute URL of *package*'s complete archive.

    An absolute ``archive_url`` is returned unchanged. A relative one is
    appended to the directory prefix of ``source_url`` (everything up to and
    including its last ``/``).

    Args:
        package: A remote package.
        diagnostics: Receives a warning if the URL cannot be made absolute.

    Returns:
        The absolute URL, or None if the package lists no archive or the
        URL cannot be resolved.
    """
    url = package.archive_url
    if not url:
        return None
    if _is_absolute(url):
        return url

    source = package.source_url or ""
    if source and not source.endswith("/"):
        source = source[: source.rfind("/") + 1]
    candidate = source + url
    if source and _is_absolute(candidate):
        return candidate

    sink = diagnostics if diagnostics is not None else LoggingDiagnostics()
    sink.log_warning(f"Failed to parse url: {candidate}")
    return None
