from typing import Optional

import requests


class HttpServiceManager:

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._timeout = timeout

    def post(self, url: str, header: dict, body: dict) -> requests.Response:
        return requests.post(url, headers=header, json=body, timeout=self._timeout)

    def get(self, url: str, params: dict) -> requests.Response:
        return requests.get(url, params=params, timeout=self._timeout)

    @staticmethod
    def read_json(response: requests.Response) -> dict:
        try:
            data = response.json()
        except ValueError:
            return {}

        return data if isinstance(data, dict) else {}
