"""HTTP client for the account API."""
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from sampler.core.errors import DataError, NetworkError
from sampler.core.logger import get_logger

logger = get_logger(__name__)

SESSIONS_PATH = "/v1/stripecli/sessions"


def parse_form_fields(fields: Sequence[str]) -> List[Tuple[str, str]]:
    """Turn ``key=value`` strings into ordered form pairs."""
    pairs = []
    for item in fields:
        key, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"Form field '{item}' must be in key=value form")
        pairs.append((key, value))
    return pairs


class APIClient:
    """Authenticated form-encoded requests against the API.

    Example:
        client = APIClient("https://api.stripe.com", api_key)
        body = client.post("/v1/prices", ["currency=usd", "unit_amount=1000"])
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def post(self, path: str, fields: Sequence[str] = ()) -> Dict[str, Any]:
        """POST form fields and return the decoded JSON object.

        Raises:
            NetworkError: Transport failure or an error status
            DataError: Response body is not a JSON object
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"POST {url}")

        try:
            response = self.session.post(
                url,
                data=parse_form_fields(fields),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise NetworkError(
                f"Request to {url} failed with status {response.status_code}: {response.text}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise DataError(f"Response from {url} is not valid JSON: {response.text}") from e

        if not isinstance(body, dict):
            raise DataError(f"Response from {url} is not a JSON object: {response.text}")
        return body

    def authorize(self, device_name: str, feature: str = "webhooks") -> Dict[str, Any]:
        """Open a CLI session scoped to a capability.

        Returns:
            Session fields; ``secret`` carries the signing secret
        """
        return self.post(
            SESSIONS_PATH,
            [f"device_name={device_name}", f"websocket_features[]={feature}"],
        )
