import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from turno.settings import get_settings

logger = logging.getLogger(__name__)


class TurnoAPIClient:
    def __init__(self,
                base_url: Optional[str] = None,
                timeout: Optional[float] = None,
                total_retries: int = 3,
                backoff_factor: float = 0.5,
                status_forcelist: tuple = (502, 503, 504)):
        """
        Initializes a requests.Session with:
            - JSON accept / content-type headers
            - HTTPAdapter for retries on connection errors and specified HTTP status codes
        """
        cfg = get_settings()
        self.base_url = (base_url or cfg.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.request_timeout
        self.session = requests.Session()

        # Retry GETs only; POST/PUT/DELETE are sent once
        retry_strategy = Retry(
            total=total_retries,
            connect=total_retries,
            read=total_retries,
            backoff_factor=backoff_factor,
            status_forcelist=status_forcelist,
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })
        logger.debug(f"Turno API base URL: {self.base_url}")

    def _handle_response(self, resp: requests.Response) -> Any:
        """
        Handle API response with proper error checking and JSON parsing.

        Raises:
            requests.HTTPError: For 4xx/5xx HTTP status codes
            ValueError: If response is not valid JSON
        """
        try:
            resp.raise_for_status()

            if not resp.content:
                logger.warning(f"Empty response received for {resp.url}")
                return {}

            return resp.json()

        except requests.HTTPError:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text}")
            raise

        except ValueError as e:
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ValueError(f"Invalid JSON response: {e}")

    def request(self, method: str, path: str, json: Any = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        resp = self.session.request(method, url, json=json, timeout=self.timeout)
        return self._handle_response(resp)

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
