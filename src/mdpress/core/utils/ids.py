"""Output identity: file-name slugs and source content hashes"""

import hashlib
import re
import unicodedata


DEFAULT_SLUG = "post"
MAX_SLUG_LENGTH = 80

_STRIP_RE = re.compile(r"[^\w\s-]")
_SEP_RE = re.compile(r"[\s_-]+")


def slugify(text: str, fallback: str = DEFAULT_SLUG) -> str:
    """Lowercase, hyphen-separated slug that is safe as a file name.

    Word characters from any script survive; path separators and dots never do.
    """
    text = unicodedata.normalize("NFKC", text).lower()
    text = _SEP_RE.sub("-", _STRIP_RE.sub("", text)).strip("-")
    return text[:MAX_SLUG_LENGTH].rstrip("-") or fallback


def doc_slug(metadata: dict, stem: str) -> str:
    """Slug for a document: front matter `slug` when it is a usable string, else the file stem."""
    value = metadata.get("slug")
    if isinstance(value, str) and value.strip():
        return slugify(value, fallback=slugify(stem))
    return slugify(stem)


def content_hash(text: str) -> str:
    """SHA-256 of text with line endings normalised, so CRLF and LF copies match."""
    normalised = text.replace("\r\n", "\n").replace("\r", "\n")
    return hashlib.sha256(normalised.encode("utf-8")).hexdigest()
