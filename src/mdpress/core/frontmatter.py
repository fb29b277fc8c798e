"""Front matter extraction: a leading `---` block of simple `key: value` lines"""

import logging

from mdpress.core.models import MetadataValue


logger = logging.getLogger(__name__)

MARKER = "---"


def _parse_value(value: str) -> MetadataValue:
    """Type a raw value: [a, b] -> list, quoted -> inner text, else the text itself."""
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1]
        # Commas always split; there is no escaping inside brackets.
        return [item.strip() for item in inner.split(",")] if inner.strip() else []
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_metadata(block: str) -> dict[str, MetadataValue]:
    """Parse the lines between the front matter markers into a flat mapping."""
    metadata: dict[str, MetadataValue] = {}
    for line in block.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if ":" not in stripped:
            continue
        key, _, value = stripped.partition(":")
        metadata[key.strip()] = _parse_value(value.strip())
    return metadata


def extract_front_matter(text: str) -> tuple[dict[str, MetadataValue], str]:
    """Return (metadata, body).

    Documents that do not open with a `---` line, or whose front matter is
    never closed, come back untouched with empty metadata.
    """
    # Only line feeds separate lines; \x0c, \u2028 and friends stay in the body.
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if not lines or lines[0].strip() != MARKER:
        return {}, text

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == MARKER:
            end_idx = i
            break
    if end_idx is None:
        logger.debug("Unterminated front matter; treating the whole document as body")
        return {}, text

    metadata = parse_metadata("\n".join(lines[1:end_idx]))
    body = "\n".join(lines[end_idx + 1:])
    return metadata, body
