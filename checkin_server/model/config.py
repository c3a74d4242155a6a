import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel


DEFAULT_TELEGRAM_API_URL = "https://api.telegram.org"
DEFAULT_GEOCODING_API_URL = "https://api.bigdatacloud.net/data/reverse-geocode-client"


def _read_timeout(environ: Mapping[str, str]) -> Optional[float]:
    value = _read(environ, "HTTP_REQUEST_TIMEOUT")
    if not value:
        return None

    try:
        return float(value)
    except ValueError:
        logging.getLogger("uvicorn").warning(f"Ignoring invalid HTTP_REQUEST_TIMEOUT : {value!r}")
        return None


def _read(environ: Mapping[str, str], name: str, default: str = "") -> str:
    # The front end build used VITE_-prefixed names for the same settings.
    value = environ.get(name) or environ.get(f"VITE_{name}") or default
    return value.strip()


class ServiceConfig(BaseModel):
    bot_token: str = ""
    member_chat_id: str = ""
    guest_chat_id: str = ""
    telegram_api_url: str = DEFAULT_TELEGRAM_API_URL
    geocoding_api_url: str = DEFAULT_GEOCODING_API_URL
    request_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        environ = os.environ if environ is None else environ
        return cls(
            bot_token=_read(environ, "TELEGRAM_BOT_TOKEN"),
            member_chat_id=_read(environ, "TELEGRAM_MEMBER_GROUP_ID"),
            guest_chat_id=_read(environ, "TELEGRAM_GUEST_GROUP_ID"),
            telegram_api_url=_read(environ, "TELEGRAM_API_URL", DEFAULT_TELEGRAM_API_URL).rstrip("/"),
            geocoding_api_url=_read(environ, "GEOCODING_API_URL", DEFAULT_GEOCODING_API_URL),
            request_timeout=_read_timeout(environ),
        )

    @property
    def telegram_configured(self) -> bool:
        return bool(self.bot_token)
