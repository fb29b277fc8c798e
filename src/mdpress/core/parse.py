"""File discovery and reading source documents into ParsedDoc"""

import logging
from pathlib import Path

from mdpress.core.frontmatter import extract_front_matter
from mdpress.core.models import ParsedDoc
from mdpress.core.utils.ids import content_hash, doc_slug


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.markdown'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def parse_text(raw: str, path: Path) -> ParsedDoc:
    """Split front matter off raw text and derive the document slug."""
    metadata, body = extract_front_matter(raw)
    return ParsedDoc(
        path=path,
        slug=doc_slug(metadata, path.stem),
        raw_markdown=raw,
        markdown=body,
        hash=content_hash(raw),
        metadata=metadata,
    )


def parse_file(path: Path) -> ParsedDoc:
    """Read a single markdown file into a ParsedDoc."""
    raw = path.read_text(encoding='utf-8-sig')
    logger.debug("Read %s (%d chars)", path, len(raw))
    return parse_text(raw, path)
