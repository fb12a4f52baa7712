import logging

from models import PoemRequest, PoemResponse
from services.errors import (
    EmptyContentError,
    TitleUnavailable,
    UpstreamError,
    ValidationError,
)
from services.generation_client import GenerationClient
from services.prompt_builder import (
    Selection,
    build_poem_prompt,
    build_title_prompt,
    default_title,
    resolve_emotion,
)

logger = logging.getLogger(__name__)

LANGUAGES = ("english", "chinese")


def validate_selection(request: PoemRequest) -> Selection:
    """Turn a raw request into a Selection or raise ValidationError."""
    character = request.character.strip()
    location = request.location.strip()
    event = request.event.strip()
    language = request.language.strip()

    if not character or not location or not event or not language:
        raise ValidationError("Missing required fields")

    if not request.emotion.strip() and not request.custom_emotion.strip():
        raise ValidationError("Either emotion or customEmotion must be provided")

    if language not in LANGUAGES:
        raise ValidationError("Unsupported language")

    return Selection(
        character=character,
        location=location,
        event=event,
        emotion=request.emotion.strip(),
        custom_emotion=request.custom_emotion.strip(),
        language=language,
    )


class PoemService:
    """
    Runs one poem request: poem body first, then the title.

    Poem failures propagate. Title failures (exhausted transports or an
    empty answer) are masked with the per-language default title.
    """

    def __init__(self, client: GenerationClient):
        self.client = client

    def generate_poem(self, selection: Selection) -> PoemResponse:
        poem = self.client.generate(build_poem_prompt(selection))
        if not poem:
            raise EmptyContentError("Failed to generate poem content")

        try:
            title = self._generate_title(selection)
        except TitleUnavailable as e:
            logger.warning(f"Using default title: {e}")
            title = default_title(selection.language)

        return PoemResponse(poem=poem, title=title)

    def _generate_title(self, selection: Selection) -> str:
        prompt = build_title_prompt(selection, resolve_emotion(selection))
        try:
            title = self.client.generate(prompt)
        except UpstreamError as e:
            raise TitleUnavailable("title generation failed") from e
        if not title:
            raise TitleUnavailable("title generation returned no text")
        return title
