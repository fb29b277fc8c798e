"""Export: derive the publishable Post and write HTML + sidecar JSON files"""

import json
import logging
from pathlib import Path

from mdpress.config import Settings
from mdpress.core.models import ConvertResult, ParsedDoc, Post, PostMetadata


logger = logging.getLogger(__name__)


def build_post(doc: ParsedDoc, result: ConvertResult, settings: Settings) -> Post:
    """Build the post payload the publishing side expects.

    Title falls back to the file stem and status to the configured default.
    A `hashtag` key is rendered as a leading paragraph when enabled.
    """
    meta = PostMetadata.model_validate(result.metadata)
    content = result.html
    if meta.hashtag and settings.prepend_hashtag:
        content = f"<p>{meta.hashtag}</p>\n{content}"
    return Post(
        title=meta.title or doc.path.stem,
        content=content,
        status=meta.status or settings.default_status,
        slug=doc.slug,
        metadata=meta,
    )


def build_sidecar(doc: ParsedDoc, post: Post) -> dict:
    """Build the sidecar JSON dict: slug, path, title, status, hash, metadata."""
    return {
        "slug": post.slug,
        "path": str(doc.path),
        "title": post.title,
        "status": post.status,
        "hash": doc.hash,
        "metadata": doc.metadata,
    }


def write_doc(doc: ParsedDoc, post: Post, output_dir: Path) -> tuple[Path, Path]:
    """Write <slug>.html + <slug>.json for a single document.

    Relative sources mirror their directory structure:
      output_dir / doc.path.parent / doc.slug.{html|json}
    Absolute sources, or ones reaching outside the working tree, land directly in output_dir.

    Returns (html_path, json_path).
    """
    mirrored = not doc.path.is_absolute() and ".." not in doc.path.parts
    dest_dir = output_dir / doc.path.parent if mirrored else output_dir
    dest_dir.mkdir(parents=True, exist_ok=True)

    html_path = dest_dir / f"{post.slug}.html"
    json_path = dest_dir / f"{post.slug}.json"

    html_path.write_text(post.content, encoding='utf-8')
    json_path.write_text(
        json.dumps(build_sidecar(doc, post), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    logger.info("Wrote %s", html_path)
    return html_path, json_path
