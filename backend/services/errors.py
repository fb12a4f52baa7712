class PoemGenerationError(Exception):
    """Base class for failures while producing a poem."""


class ValidationError(PoemGenerationError):
    """The submitted selection is incomplete or malformed."""


class UpstreamError(PoemGenerationError):
    """Both transports to the text-generation service failed."""


class EmptyContentError(PoemGenerationError):
    """The service answered successfully but with no text."""


class TitleUnavailable(PoemGenerationError):
    """No usable title could be generated; callers fall back to a default."""
