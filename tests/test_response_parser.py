import json

import pytest

from Stylist.AI.response_parser import extract_suggestion_batch, extract_message_content
from Stylist.Exception.StylistError import ExtractionError, SchemaMismatchError
from Stylist.Model.Suggestion import SuggestionBatch

from helpers import sample_batch_dict, envelope


def test_strict_parse():
    data = sample_batch_dict()
    batch = extract_suggestion_batch(json.dumps(data))
    assert isinstance(batch, SuggestionBatch)
    assert batch.to_dict() == data


def test_embedded_json_is_recovered():
    inner = json.dumps(sample_batch_dict())
    batch = extract_suggestion_batch(f"Sure! {inner} Hope that helps.")
    assert batch == extract_suggestion_batch(inner)


def test_markdown_fence_is_recovered():
    inner = json.dumps(sample_batch_dict(), indent=2)
    batch = extract_suggestion_batch(f"```json\n{inner}\n```")
    assert batch.suggestions[0].name == "Look 1"


def test_no_json_fails():
    with pytest.raises(ExtractionError) as exc:
        extract_suggestion_batch("no json here")
    assert not isinstance(exc.value, SchemaMismatchError)
    assert exc.value.message == "Failed to parse suggestions from the AI response."


def test_empty_string_fails():
    with pytest.raises(ExtractionError):
        extract_suggestion_batch("")


def test_reversed_braces_fail():
    with pytest.raises(ExtractionError):
        extract_suggestion_batch("} nothing {")


def test_missing_suggestions_key_fails():
    with pytest.raises(ExtractionError):
        extract_suggestion_batch('{"outfits": []}')


def test_two_objects_are_not_split():
    one = json.dumps(sample_batch_dict("A"))
    two = json.dumps(sample_batch_dict("B"))
    # first "{" to last "}" spans both objects and is not valid JSON
    with pytest.raises(ExtractionError):
        extract_suggestion_batch(f"{one}\n{two}")


def test_wrong_count_is_schema_mismatch():
    data = sample_batch_dict()
    data["suggestions"] = data["suggestions"][:2]
    with pytest.raises(SchemaMismatchError):
        extract_suggestion_batch(json.dumps(data))


def test_missing_field_is_schema_mismatch():
    data = sample_batch_dict()
    del data["suggestions"][1]["supplier_keywords"]
    with pytest.raises(SchemaMismatchError) as exc:
        extract_suggestion_batch(json.dumps(data))
    assert "suggestions[1].supplier_keywords" in exc.value.message


def test_boolean_price_is_rejected():
    data = sample_batch_dict()
    data["suggestions"][0]["price_estimate_egp"] = True
    with pytest.raises(SchemaMismatchError):
        extract_suggestion_batch(json.dumps(data))


def test_long_caption_is_accepted():
    data = sample_batch_dict()
    data["suggestions"][2]["caption"] = " ".join(["word"] * 30)
    batch = extract_suggestion_batch(json.dumps(data))
    assert len(batch) == 3


def test_extract_message_content():
    assert extract_message_content(envelope("hello")) == "hello"


def test_extract_message_content_missing_choice():
    assert extract_message_content(json.dumps({"choices": []})) == ""
    assert extract_message_content(envelope(None)) == ""


def test_extract_message_content_invalid_envelope():
    with pytest.raises(ExtractionError):
        extract_message_content("<html>bad gateway</html>")


def test_strict_non_object_fails():
    for text in ("[1, 2, 3]", '"text"', "42", "null"):
        with pytest.raises(ExtractionError):
            extract_suggestion_batch(text)


def test_non_text_input_fails():
    with pytest.raises(ExtractionError):
        extract_suggestion_batch(None)


def test_nan_price_is_rejected():
    text = json.dumps(sample_batch_dict()).replace("1600", "NaN", 1)
    with pytest.raises(ExtractionError):
        extract_suggestion_batch(text)
    with pytest.raises(ExtractionError):
        extract_suggestion_batch(f"Here: {text} done")


def test_infinite_price_is_rejected():
    for constant in ("Infinity", "-Infinity", "1e999"):
        text = json.dumps(sample_batch_dict()).replace("1700", constant, 1)
        with pytest.raises(ExtractionError):
            extract_suggestion_batch(text)


def test_extract_message_content_non_text():
    assert extract_message_content(json.dumps({"choices": [{"message": {"content": 12345}}]})) == ""
    assert extract_message_content(json.dumps({"choices": [{"message": {"content": {"suggestions": []}}}]})) == ""
