"""
Small utilities to build prompts for the completion service.
"""
from Stylist.Model.StylePreferences import StylePreferences

SYSTEM_PROMPT = "You are a professional Middle-Eastern fashion stylist."


def build_prompt(preferences: StylePreferences) -> str:
    return (
        "You are a professional fashion stylist specialized for Middle Eastern customers.\n"
        "Given the inputs:\n"
        f'gender="{preferences.gender}", occasion="{preferences.occasion}", '
        f'budget="{preferences.budget}", style="{preferences.style}".\n'
        'Output EXACTLY a JSON object with a single key "suggestions" holding an array of 3 objects. '
        "Each object must have:\n"
        "- name (string)\n"
        "- items (array of strings, top/bottom/shoes/accessories)\n"
        "- price_estimate_egp (number)\n"
        "- caption (string, max 18 words)\n"
        "- supplier_keywords (array of 3 short keywords)\n\n"
        "Example output:\n"
        '{"suggestions":[{"name":"...","items":["..."],"price_estimate_egp":1200,'
        '"caption":"...","supplier_keywords":["...","...","..."]}, ...]}\n\n'
        "Do NOT add any text outside the JSON. Keep prices realistic for Egyptian market."
    )
