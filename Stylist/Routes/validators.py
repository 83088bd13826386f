from typing import Any, Dict, List, Tuple

from Stylist.Model.StylePreferences import StylePreferences
from Stylist.Model.Suggestion import SuggestionBatch


def validate_generate_payload(data: Dict[str, Any]) -> Tuple[str, StylePreferences]:
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    api_key = data.get("api_key")
    if api_key is not None and not isinstance(api_key, str):
        raise ValueError("api_key must be a string")
    preferences = StylePreferences.from_payload(data)
    return api_key or "", preferences


def map_suggestions(batch: SuggestionBatch) -> List[Dict[str, Any]]:
    return [
        {
            "name": s.name,
            "items": list(s.items),
            "price_estimate_egp": s.price_estimate_egp,
            "price_label": f"{s.price_estimate_egp} EGP",
            "caption": s.caption,
            "supplier_keywords": list(s.supplier_keywords),
        }
        for s in batch
    ]
