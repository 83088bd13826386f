from dataclasses import dataclass, field
from typing import Optional

from Stylist.Model.StylePreferences import StylePreferences
from Stylist.Model.Suggestion import SuggestionBatch

"""Per-user generation context, owned by the caller and handed to StyleBusiness.

The batch and the generating flag are only ever replaced, never updated in place.
"""
@dataclass
class StylistSession:
    api_key: str = ""
    preferences: StylePreferences = field(default_factory=StylePreferences)
    batch: Optional[SuggestionBatch] = None
    generating: bool = False

    def clear(self) -> None:
        self.api_key = ""
        self.batch = None
