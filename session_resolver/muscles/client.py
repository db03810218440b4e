"""Remote muscle-selection persistence client.

Talks to the muscle-selection endpoint of the site backend:

- GET    {base}/muscle-selection -> {"success": bool, "data": {"selectedGroups": [...], "selectedMuscles": {...}}}
- POST   {base}/muscle-selection <- {"selectedGroups": [...], "selectedMuscles": {...}} -> {"success": bool}
- DELETE {base}/muscle-selection -> {"success": bool}

A non-success body means "no remote data", not a failure. Transport errors,
non-2xx statuses, and malformed bodies raise MuscleSyncError.
"""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from session_resolver.config.settings import settings
from session_resolver.errors import MuscleSyncError
from session_resolver.muscles.types import MuscleSelectionData

SELECTION_PATH = "/muscle-selection"


class MuscleSelectionClient:
    """Async client for the remote muscle-selection store."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = (base_url or settings.muscle_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.muscle_api_timeout_seconds
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client, recreating it if it was closed."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def _request(self, method: str, json_body: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.base_url}{SELECTION_PATH}"
        try:
            response = await self._get_client().request(method, url, json=json_body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MuscleSyncError("HTTP_ERROR", f"{method} {url} returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise MuscleSyncError("NETWORK_ERROR", f"{method} {url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise MuscleSyncError("INVALID_RESPONSE", f"{method} {url} returned non-JSON body") from e

        if not isinstance(body, dict):
            raise MuscleSyncError("INVALID_RESPONSE", f"{method} {url} returned {type(body).__name__}, expected object")
        return body

    async def load(self) -> MuscleSelectionData | None:
        """Fetch the persisted selection.

        Returns:
            The remote selection, or None when the store reports no data

        Raises:
            MuscleSyncError: On transport, HTTP, or body-shape errors
        """
        body = await self._request("GET")
        if not body.get("success"):
            logger.bind(message=body.get("message")).debug("Remote muscle store returned no selection")
            return None

        data = body.get("data")
        if not data:
            return None

        try:
            selection = MuscleSelectionData.model_validate(data)
        except ValidationError as e:
            raise MuscleSyncError("INVALID_RESPONSE", f"Malformed muscle selection: {e}") from e

        logger.bind(groups=selection.selected_groups).debug("Loaded remote muscle selection")
        return selection

    async def save(self, selection: MuscleSelectionData) -> bool:
        """Persist a selection. Returns the endpoint's success flag."""
        body = await self._request("POST", selection.to_wire())
        success = bool(body.get("success"))
        logger.bind(groups=selection.selected_groups, success=success).debug("Saved remote muscle selection")
        return success

    async def clear(self) -> bool:
        body = await self._request("DELETE")
        return bool(body.get("success"))

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
