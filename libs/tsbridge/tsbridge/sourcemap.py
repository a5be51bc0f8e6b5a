"""Source map preparation for serving alongside compiled output."""

from __future__ import annotations

import json
import logging
from typing import Any

from tsbridge.errors import ParseError

logger = logging.getLogger(__name__)


def prepare_source_map(source_map_text: str, file_content: str, source_map_path: str) -> dict[str, Any]:
    """Parse a source map and point it at exactly one source file.

    The returned map embeds *file_content* as its only source, named
    *source_map_path*; any other sources it listed are discarded.

    Raises:
        ParseError: *source_map_text* is not a JSON object.
    """
    try:
        source_map = json.loads(source_map_text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid source map JSON: {e}", source_map_path) from e
    if not isinstance(source_map, dict):
        raise ParseError(
            f"Source map must be a JSON object, got {type(source_map).__name__}", source_map_path
        )

    if len(source_map.get("sources") or ()) > 1:
        logger.debug(f"Collapsing {len(source_map['sources'])} sources into {source_map_path}")

    source_map["sourcesContent"] = [file_content]
    source_map["sources"] = [source_map_path]
    return source_map
