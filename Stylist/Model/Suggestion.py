from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple, Union

BATCH_SIZE = 3
KEYWORD_COUNT = 3
MAX_CAPTION_WORDS = 18

"""One outfit suggestion produced by the model."""
@dataclass(frozen=True)
class Suggestion:
    name: str
    items: Tuple[str, ...]
    price_estimate_egp: Union[int, float]
    caption: str
    supplier_keywords: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["items"] = list(self.items)
        data["supplier_keywords"] = list(self.supplier_keywords)
        return data

"""The full set of suggestions for one generation; only ever replaced as a whole."""
@dataclass(frozen=True)
class SuggestionBatch:
    suggestions: Tuple[Suggestion, ...]

    def __len__(self) -> int:
        return len(self.suggestions)

    def __iter__(self):
        return iter(self.suggestions)

    def to_list(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self.suggestions]

    def to_dict(self) -> Dict[str, Any]:
        return {"suggestions": self.to_list()}
