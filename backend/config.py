import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # License verification (Nursys e-Notify)
    nursys_api_url: str = "https://api.nursys.com/v1"
    nursys_api_key: str = ""
    license_mock_mode: bool = False  # force the mock verifier even with a key
    license_request_timeout: float = 10.0
    license_verify_rate_limit: str = "10/minute"

    # Community content filter
    profanity_words_file: str = ""  # one word per line; empty -> built-in list
    profanity_cache_ttl_seconds: float = 300.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def use_mock_verifier(self) -> bool:
        return self.license_mock_mode or not self.nursys_api_key


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
