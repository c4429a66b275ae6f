"""Error taxonomy shared by the normalizer and the upstream clients."""


class APIClientError(Exception):
    """Base class for every failure reported by an upstream client."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


# --- Parse-time failures (never retried) ---

class MalformedUpstreamData(APIClientError):
    pass


class MissingLocalizedText(APIClientError):
    def __init__(self, language: str, seen_languages: list[str]):
        self.language = language
        self.seen_languages = seen_languages
        seen = ", ".join(sorted(set(seen_languages))) or "none"
        super().__init__(f"No '{language}' flavor text found (languages seen: {seen})")


# --- Transport / HTTP failures ---

class NotFound(APIClientError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Did not find '{name}'")


class UpstreamUnavailable(APIClientError):
    pass


class RateLimited(APIClientError):
    pass


class InvalidResponseShape(APIClientError):
    pass
