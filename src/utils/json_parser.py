"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class JSONParser:
    """Helper class to extract clean JSON objects from LLM responses."""

    @staticmethod
    def loads_object(text: str) -> Optional[Dict[str, Any]]:
        """Strictly decode text as a JSON object, None if it is not one."""
        try:
            parsed = json.loads(text)
        except (ValueError, TypeError, RecursionError) as e:
            # ValueError covers JSONDecodeError and the int digit limit
            logger.debug(f"JSONParser: strict decode failed ({type(e).__name__})")
            return None
        if not isinstance(parsed, dict):
            logger.debug(f"JSONParser: decoded {type(parsed).__name__}, expected object")
            return None
        return parsed

    @staticmethod
    def find_balanced_object(text: str) -> Optional[str]:
        """
        Return the first balanced {...} substring of text.

        Braces inside JSON string literals are ignored. If an opening brace
        never closes, scanning resumes at the next opening brace.
        """
        start = text.find("{")
        while start != -1:
            end = JSONParser._match_closing_brace(text, start)
            if end is not None:
                return text[start : end + 1]
            start = text.find("{", start + 1)
        return None

    @staticmethod
    def _match_closing_brace(text: str, start: int) -> Optional[int]:
        depth = 0
        in_string = False
        escaped = False
        for index in range(start, len(text)):
            char = text[index]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return index
        return None
