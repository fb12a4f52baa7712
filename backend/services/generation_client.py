import logging
from urllib.parse import quote

import requests

from services.errors import UpstreamError

logger = logging.getLogger(__name__)

# Characters left unescaped when the prompt is placed in the URL path,
# matching JavaScript's encodeURIComponent.
_PATH_SAFE = "-_.!~*'()"

# A prompt that cannot be encoded (e.g. lone surrogates) fails the URL
# transport with UnicodeError rather than a requests error.
TRANSPORT_ERRORS = (requests.RequestException, UnicodeError)


class GenerationClient:
    """
    Thin client for a hosted text-generation endpoint.

    generate() tries the JSON POST transport first and, if that fails for any
    reason, retries exactly once with the prompt encoded into the URL path.
    There is no backoff and no further retry. The fallback may return different
    text than the primary would have; the endpoint is a stateless generator.

    Calls block. A client disconnect does not cancel an attempt already in
    flight, so one poem request may hold its worker for up to four timeouts
    (poem and title, primary and fallback each).
    """

    def __init__(
        self,
        base_url: str = "https://text.pollinations.ai",
        model: str = "openai",
        temperature: float = 0.8,
        max_tokens: int = 500,
        timeout: float = 10,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        try:
            return self._generate_post(prompt)
        except TRANSPORT_ERRORS as e:
            logger.warning(f"POST generation failed ({e}), falling back to GET")

        try:
            return self._generate_get(prompt)
        except TRANSPORT_ERRORS as e:
            logger.error(f"GET generation failed: {e}")
            raise UpstreamError("Text generation service unavailable") from e

    def _generate_post(self, prompt: str) -> str:
        payload = {
            "prompt": prompt,
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        resp = requests.post(f"{self.base_url}/", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return self._read_text(resp)

    def _generate_get(self, prompt: str) -> str:
        url = f"{self.base_url}/{quote(prompt, safe=_PATH_SAFE)}"
        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return self._read_text(resp)

    @staticmethod
    def _read_text(resp: requests.Response) -> str:
        # The endpoint often omits a charset; requests would then assume latin-1.
        return resp.content.decode("utf-8", errors="replace").strip()
