"""mdpress: Markdown with front matter -> HTML post content + metadata"""

from mdpress.core.convert.convert import convert_body
from mdpress.core.frontmatter import extract_front_matter, parse_metadata
from mdpress.core.models import ConvertResult
from mdpress.core.pipeline import convert_document

__version__ = "0.1.0"
__all__ = [
    "ConvertResult",
    "convert_body",
    "convert_document",
    "extract_front_matter",
    "parse_metadata",
]
