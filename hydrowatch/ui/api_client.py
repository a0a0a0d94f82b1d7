"""HTTP client the dashboard uses to reach the HydroWatch API."""

from typing import List, Optional

import requests
from loguru import logger

from hydrowatch.utils.config import settings


class ChatProxyError(RuntimeError):
    """The chat proxy returned an error or could not be reached."""


class HydroWatchAPI:
    """Thin wrapper over the server endpoints; keeps credentials server-side."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = (base_url or settings.ui.api_base_url).rstrip("/")
        self.timeout = timeout or settings.ui.api_timeout_seconds

    def chat(self, messages: List[dict]) -> str:
        """POST the conversation to /api/ai/chat and return the reply text."""
        try:
            resp = requests.post(
                f"{self.base_url}/api/ai/chat",
                json={"messages": messages},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Chat proxy unreachable: {e}")
            raise ChatProxyError(str(e)) from e

        if resp.status_code != 200:
            try:
                body = resp.json()
            except ValueError:
                body = {}
            detail = body.get("details") or body.get("error") or resp.text
            logger.error(f"Chat proxy error {resp.status_code}: {detail}")
            raise ChatProxyError(f"API request failed with status {resp.status_code}: {detail}")

        return resp.json()["content"]

    def health(self) -> bool:
        try:
            resp = requests.get(f"{self.base_url}/health", timeout=5)
            return resp.status_code == 200
        except requests.RequestException:
            return False
