from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Option(BaseModel):
    id: str
    label: str  # Shown in the form's select


class OptionsResponse(BaseModel):
    characters: List[Option]
    locations: List[Option]
    events: List[Option]
    emotions: List[Option]
    languages: List[Option]


class PoemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Missing fields default to "" so validation can report them uniformly
    character: str = ""
    location: str = ""
    event: str = ""
    emotion: str = ""
    custom_emotion: str = Field(default="", alias="customEmotion")
    language: str = ""


class PoemResponse(BaseModel):
    poem: str
    title: str


class ErrorResponse(BaseModel):
    error: str
