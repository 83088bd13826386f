"""Bilingual (English / Arabic) label tables for the stylist page."""
from typing import Any, Dict

DEFAULT_LANGUAGE = "en"
RTL_LANGUAGES = {"ar"}

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "VYRA — AI Personal Stylist",
        "pasteKey": "Paste OpenAI API Key here (sk-...)",
        "gender": "Gender",
        "occasion": "Occasion",
        "style": "Style",
        "budget": "Budget",
        "generate": "Generate Outfit",
        "generating": "Generating...",
        "warning": "For testing only: pasting API key here is convenient but not secure for public use.",
        "clear": "Clear",
        "results": "Suggestions",
        "empty": "No suggestions yet.",
        "switchLanguage": "العربي",
    },
    "ar": {
        "title": "VYRA — الأستايلر الذكي",
        "pasteKey": "لصق مفتاح OpenAI هنا (sk-...)",
        "gender": "النوع",
        "occasion": "المناسبة",
        "style": "الستايل",
        "budget": "الميزانية",
        "generate": "توليد الإطلالة",
        "generating": "جاري التوليد...",
        "warning": "للتجربة فقط: لصق المفتاح هنا مريح لكنه غير آمن للاستخدام العام.",
        "clear": "مسح",
        "results": "الاقتراحات",
        "empty": "لا توجد اقتراحات بعد.",
        "switchLanguage": "EN",
    },
}

# Select options carry both languages in one label, as on the form.
OPTION_LABELS: Dict[str, Dict[str, str]] = {
    "gender": {"female": "Female / أنثى", "male": "Male / ذكر", "unisex": "Unisex / للجميع"},
    "occasion": {"casual": "Casual / يومي", "work": "Work / مقابلة", "wedding": "Wedding / زفاف", "party": "Party / سهرة"},
    "style": {"modern": "Modern", "vintage": "Vintage", "street": "Street", "elegant": "Elegant"},
    "budget": {"low": "Low", "medium": "Medium", "high": "High"},
}


def resolve_language(lang: str) -> str:
    lang = (lang or "").strip().lower()
    return lang if lang in LABELS else DEFAULT_LANGUAGE


def get_labels(lang: str) -> Dict[str, Any]:
    lang = resolve_language(lang)
    return {
        "lang": lang,
        "dir": "rtl" if lang in RTL_LANGUAGES else "ltr",
        "other_lang": "en" if lang == "ar" else "ar",
        "labels": LABELS[lang],
        "options": OPTION_LABELS,
    }
