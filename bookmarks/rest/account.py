from typing import Any, Dict, Optional

import httpx

from utils.utils import logger

class Account:
    """
    An authenticated handle on the bookmarks service.
    Credentials are supplied by the caller; this class only attaches them
    to requests.
    """

    def __init__(self, base_url: str, username: str, password: str,
                 timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/') + '/'
        self.username = username
        self._auth = httpx.BasicAuth(username, password)
        self.request_timeout = timeout  # seconds
        self._transport = transport

    def _client_options(self) -> Dict[str, Any]:
        options = {
            'base_url': self.base_url,
            'auth': self._auth,
            'timeout': self.request_timeout,
            'headers': {'Accept': 'application/json'},
        }
        if self._transport is not None:
            options['transport'] = self._transport
        return options

    async def make_auth_request(self, path: str) -> Any:
        """
        GET a resource relative to the service root and return the decoded
        JSON body. Transport, status and decoding errors are raised as is.
        """
        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.get(path.lstrip('/'))
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Request for {path} failed: {e}", component="Account")
            raise

        logger.debug(f"Fetched {path} ({response.status_code})", component="Account")
        return payload
