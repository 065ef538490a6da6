"""Configuration management for the hbasectl application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration with sensible defaults."""

    # HBase REST gateway
    HBASE_REST_URL: str = os.getenv("HBASE_REST_URL", "http://localhost:8080")
    HBASE_REST_USER: str = os.getenv("HBASE_REST_USER", "")
    HBASE_REST_PASSWORD: str = os.getenv("HBASE_REST_PASSWORD", "")
    VERIFY_SSL: bool = _as_bool(os.getenv("VERIFY_SSL", "true"))

    # Timeouts (in seconds)
    API_TIMEOUT: int = int(os.getenv("API_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Security
    REDACT_KEYS: tuple = ("password", "secret", "token", "api_key")

    @classmethod
    def validate(cls, url: str = "") -> None:
        """Validate required configuration, with an optional URL override."""
        required = {
            "HBASE_REST_URL": url or cls.HBASE_REST_URL,
        }
        missing = [k for k, v in required.items() if not v]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")
        if cls.HBASE_REST_PASSWORD and not cls.HBASE_REST_USER:
            raise ValueError("HBASE_REST_PASSWORD is set but HBASE_REST_USER is empty")

    @classmethod
    def as_dict(cls) -> dict:
        """Return the effective configuration with secrets redacted."""
        values = {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper() and key != "REDACT_KEYS"
        }
        return {
            k: "[REDACTED]" if v and any(r in k.lower() for r in cls.REDACT_KEYS) else v
            for k, v in values.items()
        }

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
