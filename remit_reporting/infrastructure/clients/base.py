"""Shared HTTP plumbing for collaborator clients"""

import httpx
from typing import Any, Dict, Optional
from remit_reporting.domain.exceptions import CollaboratorError
from remit_reporting.config import settings


class CollaboratorClient:
    """JSON-over-HTTP client for one upstream collaborator service"""

    collaborator = "collaborator"

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        GET a JSON document from the collaborator.

        Raises:
            CollaboratorError: On timeout, transport or HTTP errors, or non-JSON body
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}{path}", params=params)
                response.raise_for_status()
                payload = response.json()

            except httpx.TimeoutException as e:
                raise CollaboratorError(self.collaborator, f"timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise CollaboratorError(self.collaborator, f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise CollaboratorError(self.collaborator, f"unreachable: {e}") from e
            except ValueError as e:
                raise CollaboratorError(self.collaborator, f"invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise CollaboratorError(self.collaborator, "expected a JSON object")
        return payload

    def _invalid(self, error: Exception) -> CollaboratorError:
        return CollaboratorError(self.collaborator, f"invalid data: {error}")
