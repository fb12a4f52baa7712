from models import Option, PoemRequest, PoemResponse
import pytest
from pydantic import ValidationError


def test_option_model():
    option = Option(id="hero", label="Hero of Legend")
    assert option.id == "hero"
    assert option.label == "Hero of Legend"


def test_option_model_missing_label():
    with pytest.raises(ValidationError):
        Option(id="hero")  # type: ignore


def test_poem_request_reads_camel_case_alias():
    req = PoemRequest(**{"character": "hero", "customEmotion": "awe"})
    assert req.custom_emotion == "awe"
    assert req.location == ""


def test_poem_request_accepts_field_name():
    req = PoemRequest(custom_emotion="awe")
    assert req.custom_emotion == "awe"


def test_poem_response_model_invalid_type():
    with pytest.raises(ValidationError):
        PoemResponse(poem=123, title="Hello")  # type: ignore
