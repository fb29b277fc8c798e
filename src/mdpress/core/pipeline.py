"""Pipeline step functions: text conversion and file-level orchestration"""

import logging
from pathlib import Path

from mdpress.config import Settings
from mdpress.core.convert.convert import convert_body
from mdpress.core.export import build_post, write_doc
from mdpress.core.frontmatter import extract_front_matter
from mdpress.core.models import ConvertResult
from mdpress.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def convert_document(text: str) -> ConvertResult:
    """Split front matter from text and convert the body to HTML. Never raises."""
    metadata, body = extract_front_matter(text)
    return ConvertResult(html=convert_body(body), metadata=metadata)


def run_convert(
    path: str | Path,
    output_dir: Path,
    settings: Settings,
    ) -> list[tuple[Path, Path]]:
    """Convert every Markdown file under path. Returns (source_path, html_file) pairs."""
    results = []
    for p in discover_files(Path(path)):
        try:
            doc = parse_file(p)
            result = ConvertResult(html=convert_body(doc.markdown), metadata=doc.metadata)
            post = build_post(doc, result, settings)
            html_path, _ = write_doc(doc, post, output_dir)
            results.append((p, html_path))
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
    logger.info("Converted %d file(s) into %s", len(results), output_dir)
    return results
