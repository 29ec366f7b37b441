"""
GitHub blob URL detection and rewriting.

Reading a file view on github.com through the reader API is slow and noisy;
the same file is available as plain text on the raw content host, so the
reader tool fetches that directly instead.
"""

import re
from dataclasses import dataclass

GITHUB_HOST = "github.com"
RAW_CONTENT_HOST = "raw.githubusercontent.com"

_BLOB_MARKER = "/blob/"
_BLOB_PATTERN = re.compile(r"github\.com/([^/]+)/([^/]+)/blob/([^/]+)/(.+)")
_COMMIT_SHA_PATTERN = re.compile(r"[0-9a-fA-F]{40}")


@dataclass(frozen=True)
class GithubUrl:
    is_special_case: bool
    rewritten_url: str


def classify_url(url: str) -> GithubUrl:
    """
    Classify `url` and compute its raw content equivalent.

    `github.com/<owner>/<repo>/blob/<ref>/<path>` becomes
    `https://raw.githubusercontent.com/<owner>/<repo>/<ref>/<path>` when
    `ref` is a 40 character commit sha, and
    `https://raw.githubusercontent.com/<owner>/<repo>/refs/heads/<ref>/<path>`
    otherwise. A blob URL the pattern cannot parse gets a plain textual
    host swap. Any other URL is returned unchanged.
    """
    if GITHUB_HOST not in url or _BLOB_MARKER not in url:
        return GithubUrl(is_special_case=False, rewritten_url=url)

    match = _BLOB_PATTERN.search(url)
    if match is None:
        rewritten = url.replace(GITHUB_HOST, RAW_CONTENT_HOST).replace(_BLOB_MARKER, "/")
        return GithubUrl(is_special_case=True, rewritten_url=rewritten)

    owner, repo, ref, path = match.groups()
    if _COMMIT_SHA_PATTERN.fullmatch(ref):
        rewritten = f"https://{RAW_CONTENT_HOST}/{owner}/{repo}/{ref}/{path}"
    else:
        rewritten = f"https://{RAW_CONTENT_HOST}/{owner}/{repo}/refs/heads/{ref}/{path}"
    return GithubUrl(is_special_case=True, rewritten_url=rewritten)


__all__ = ["GithubUrl", "classify_url", "RAW_CONTENT_HOST"]
