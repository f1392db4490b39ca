from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the advisory service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def request_advisory(
        self,
        payload: Dict[str, Any],
        station: bool = False,
        threshold: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Submit readings (or a station snapshot) and return the advisory payload."""
        try:
            if station:
                params = {"threshold": threshold} if threshold is not None else None
                response = self._client.post("/advisory/station", json=payload, params=params)
            else:
                body = dict(payload)
                if threshold is not None:
                    body["threshold"] = threshold
                response = self._client.post("/advisory", json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response.json()

    def get_psychrometrics(self, temperature: float, humidity: float) -> Dict[str, Any]:
        try:
            response = self._client.get(
                "/psychrometrics",
                params={"temperature": temperature, "humidity": humidity},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response.json()

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: Any = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
