import logging
from typing import Optional

from ..model.config import DEFAULT_GEOCODING_API_URL
from ..util.coordinate_util import CoordinateUtil
from .http_service import HttpServiceManager


class AddressLookup:

    def __init__(
        self,
        api_url: str = DEFAULT_GEOCODING_API_URL,
        http_service: Optional[HttpServiceManager] = None,
    ) -> None:
        self._api_url = api_url
        self._http = http_service or HttpServiceManager()
        self.logger = logging.getLogger("uvicorn")
        self.logger.setLevel(logging.INFO)

    def lookup(self, latitude: float, longitude: float) -> str:
        """Resolve coordinates to a Vietnamese display address.

        Falls back to ``"<lat>, <lng>"`` on any failure, so callers always get
        something printable.
        """
        fallback = CoordinateUtil.format_pair(latitude, longitude)

        try:
            response = self._http.get(
                self._api_url,
                {"latitude": latitude, "longitude": longitude, "localityLanguage": "vi"},
            )
            display_name = HttpServiceManager.read_json(response).get("display_name")
        except Exception as e:
            self.logger.warning(f"Reverse geocoding of {fallback} failed. Error is {e}")
            return fallback

        if not display_name:
            self.logger.warning(f"Reverse geocoding of {fallback} returned no display name")
            return fallback

        return str(display_name)
