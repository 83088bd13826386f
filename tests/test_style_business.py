import json

import pytest

from Stylist.Business.StyleBusiness import StyleBusiness, validate_api_key
from Stylist.Events.event_dispatcher import EventDispatcher
from Stylist.Exception.StylistError import ValidationError, TransportError, ExtractionError
from Stylist.Model.StylePreferences import StylePreferences
from Stylist.Model.StylistSession import StylistSession

from helpers import FakeAIClient, sample_batch_dict


def test_validate_api_key_length():
    with pytest.raises(ValidationError):
        validate_api_key("  123456789  ")
    assert validate_api_key("  1234567890  ") == "1234567890"


def test_validate_api_key_missing():
    for key in (None, "", "     "):
        with pytest.raises(ValidationError):
            validate_api_key(key)


def test_short_key_sends_no_request():
    fake = FakeAIClient(json.dumps(sample_batch_dict()))
    session = StylistSession(api_key="123456789")
    with pytest.raises(ValidationError):
        StyleBusiness(client_factory=fake).GenerateOutfits(session)
    assert fake.prompts == []
    assert session.generating is False


def test_ten_character_key_is_accepted():
    fake = FakeAIClient(json.dumps(sample_batch_dict()))
    session = StylistSession(api_key=" 1234567890 ")
    batch = StyleBusiness(client_factory=fake).GenerateOutfits(session)
    assert len(batch) == 3
    assert fake.keys == ["1234567890"]
    assert len(fake.prompts) == 1


def test_prompt_uses_session_preferences():
    fake = FakeAIClient(json.dumps(sample_batch_dict()))
    prefs = StylePreferences(gender="male", occasion="party", style="street", budget="low")
    StyleBusiness(client_factory=fake).GenerateOutfits(StylistSession(api_key="sk-1234567890", preferences=prefs))
    assert 'occasion="party"' in fake.prompts[0]
    assert 'style="street"' in fake.prompts[0]


def test_second_generation_replaces_batch():
    fake = FakeAIClient(json.dumps(sample_batch_dict("First")))
    business = StyleBusiness(client_factory=fake)
    session = StylistSession(api_key="sk-1234567890")

    business.GenerateOutfits(session)
    assert [s.name for s in session.batch] == ["First 1", "First 2", "First 3"]

    fake.content = "Here you go: " + json.dumps(sample_batch_dict("Second"))
    business.GenerateOutfits(session)
    assert [s.name for s in session.batch] == ["Second 1", "Second 2", "Second 3"]


def test_generating_flag_set_during_request():
    seen = []
    session = StylistSession(api_key="sk-1234567890")

    class ObservingClient(FakeAIClient):
        def generate(self, prompt):
            seen.append((session.generating, session.batch))
            return super().generate(prompt)

    StyleBusiness(client_factory=ObservingClient(json.dumps(sample_batch_dict()))).GenerateOutfits(session)
    assert seen == [(True, None)]
    assert session.generating is False


def test_transport_failure_clears_generating_and_batch():
    business = StyleBusiness(client_factory=FakeAIClient(json.dumps(sample_batch_dict())))
    session = StylistSession(api_key="sk-1234567890")
    business.GenerateOutfits(session)

    failing = StyleBusiness(client_factory=FakeAIClient(error=TransportError("boom", upstream_status=500, body="oops")))
    with pytest.raises(TransportError):
        failing.GenerateOutfits(session)
    assert session.generating is False
    assert session.batch is None


def test_extraction_failure_clears_generating():
    session = StylistSession(api_key="sk-1234567890")
    with pytest.raises(ExtractionError):
        StyleBusiness(client_factory=FakeAIClient("I cannot help with that.")).GenerateOutfits(session)
    assert session.generating is False
    assert session.batch is None


def test_events_dispatched():
    events = []
    disp = EventDispatcher()
    disp.subscribe("generation_started", lambda **kw: events.append("started"))
    disp.subscribe("generation_succeeded", lambda **kw: events.append(("succeeded", len(kw["batch"]))))
    disp.subscribe("generation_failed", lambda **kw: events.append(("failed", type(kw["error"]).__name__)))

    business = StyleBusiness(client_factory=FakeAIClient(json.dumps(sample_batch_dict())), dispatcher=disp)
    business.GenerateOutfits(StylistSession(api_key="sk-1234567890"))

    business.client_factory = FakeAIClient("nope")
    with pytest.raises(ExtractionError):
        business.GenerateOutfits(StylistSession(api_key="sk-1234567890"))

    assert events == ["started", ("succeeded", 3), "started", ("failed", "ExtractionError")]


def test_session_clear():
    session = StylistSession(api_key="sk-1234567890")
    StyleBusiness(client_factory=FakeAIClient(json.dumps(sample_batch_dict()))).GenerateOutfits(session)
    session.clear()
    assert session.api_key == ""
    assert session.batch is None
