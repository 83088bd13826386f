from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

GENDERS: Tuple[str, ...] = ("female", "male", "unisex")
OCCASIONS: Tuple[str, ...] = ("casual", "work", "wedding", "party")
STYLES: Tuple[str, ...] = ("modern", "vintage", "street", "elegant")
BUDGETS: Tuple[str, ...] = ("low", "medium", "high")

# field -> (allowed values, form default)
PREFERENCE_FIELDS: Dict[str, Tuple[Tuple[str, ...], str]] = {
    "gender": (GENDERS, "female"),
    "occasion": (OCCASIONS, "casual"),
    "style": (STYLES, "modern"),
    "budget": (BUDGETS, "medium"),
}

"""Styling choices captured at generation time."""
@dataclass(frozen=True)
class StylePreferences:
    gender: str = "female"
    occasion: str = "casual"
    style: str = "modern"
    budget: str = "medium"

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "StylePreferences":
        values = {}
        for field, (allowed, default) in PREFERENCE_FIELDS.items():
            value = data.get(field) or default
            if value not in allowed:
                raise ValueError(f"{field} must be one of: {', '.join(allowed)}")
            values[field] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
