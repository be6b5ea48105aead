import logging
import os
from dotenv import load_dotenv

load_dotenv()

BASE = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")

def parse_timeout(value: str):
    # unset means wait for the transport, no client-side timeout
    value = value.strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"GITHUB_TIMEOUT must be a number of seconds, got {value!r}") from exc


TIMEOUT = parse_timeout(os.getenv("GITHUB_TIMEOUT", ""))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
