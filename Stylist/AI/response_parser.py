"""
Parser functions for completion responses.

The model is asked for bare JSON but often wraps it in prose or code fences,
so extraction falls back to the outermost brace pair. Only the first `{` and
the last `}` are tried; several independent objects in one reply are not
recovered.
"""
import json
import math
from numbers import Number
from typing import Any, List, Optional
import logging

from Stylist.Exception.StylistError import ExtractionError, SchemaMismatchError
from Stylist.Model.Suggestion import (
    BATCH_SIZE,
    KEYWORD_COUNT,
    MAX_CAPTION_WORDS,
    Suggestion,
    SuggestionBatch,
)

logger = logging.getLogger(__name__)


def extract_message_content(envelope_text: str) -> str:
    """Return choices[0].message.content from a chat-completion envelope, or "" if absent."""
    try:
        outer = json.loads(envelope_text)
    except ValueError:
        logger.error("Completion envelope is not valid JSON")
        raise ExtractionError("Completion envelope is not valid JSON", raw_text=envelope_text or "")
    try:
        content = outer["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        logger.warning("Completion envelope has no message content")
        return ""
    if not isinstance(content, str):
        logger.warning("Completion message content is not text: %s", type(content).__name__)
        return ""
    return content


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _parse_json_object(raw_text: str) -> Optional[Any]:
    try:
        return _loads(raw_text)
    except (ValueError, TypeError, RecursionError):
        pass
    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start != -1 and end != -1 and end > start:
        try:
            return _loads(raw_text[start:end + 1])
        except (ValueError, RecursionError):
            return None
    return None


def _require_string_list(value: Any, where: str, raw_text: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SchemaMismatchError(f"{where} must be an array of strings", raw_text=raw_text)
    return value


def _build_suggestion(index: int, entry: Any, raw_text: str) -> Suggestion:
    where = f"suggestions[{index}]"
    if not isinstance(entry, dict):
        raise SchemaMismatchError(f"{where} must be an object", raw_text=raw_text)

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SchemaMismatchError(f"{where}.name must be a non-empty string", raw_text=raw_text)

    items = _require_string_list(entry.get("items"), f"{where}.items", raw_text)

    price = entry.get("price_estimate_egp")
    if isinstance(price, bool) or not isinstance(price, Number) or not math.isfinite(price):
        raise SchemaMismatchError(f"{where}.price_estimate_egp must be a number", raw_text=raw_text)

    caption = entry.get("caption")
    if not isinstance(caption, str):
        raise SchemaMismatchError(f"{where}.caption must be a string", raw_text=raw_text)
    if len(caption.split()) > MAX_CAPTION_WORDS:
        logger.warning("%s.caption is longer than %d words", where, MAX_CAPTION_WORDS)

    keywords = _require_string_list(entry.get("supplier_keywords"), f"{where}.supplier_keywords", raw_text)
    if len(keywords) != KEYWORD_COUNT:
        raise SchemaMismatchError(
            f"{where}.supplier_keywords must hold exactly {KEYWORD_COUNT} keywords", raw_text=raw_text
        )

    return Suggestion(
        name=name,
        items=tuple(items),
        price_estimate_egp=price,
        caption=caption,
        supplier_keywords=tuple(keywords),
    )


def extract_suggestion_batch(raw_text: str) -> SuggestionBatch:
    logger.info("Extracting suggestions JSON from AI response")
    if not isinstance(raw_text, str):
        raw_text = ""
    logger.debug("AI response text (truncated): %s", raw_text[:2000])

    parsed = _parse_json_object(raw_text)
    if not isinstance(parsed, dict) or "suggestions" not in parsed:
        logger.error("AI response did not contain a 'suggestions' object")
        raise ExtractionError(raw_text=raw_text)

    entries = parsed["suggestions"]
    if not isinstance(entries, list):
        raise SchemaMismatchError("suggestions must be an array", raw_text=raw_text)
    if len(entries) != BATCH_SIZE:
        raise SchemaMismatchError(
            f"suggestions must hold exactly {BATCH_SIZE} entries, got {len(entries)}", raw_text=raw_text
        )

    return SuggestionBatch(tuple(_build_suggestion(i, e, raw_text) for i, e in enumerate(entries)))
