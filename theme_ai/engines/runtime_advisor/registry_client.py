"""Async npm registry client — fetch per-version package metadata."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from theme_ai.exceptions import RegistryError

log = structlog.get_logger("theme_ai.registry")


def encode_package_name(name: str) -> str:
    """Encode a package name for a registry URL path.

    Scoped names keep the leading ``@`` but escape the slash
    (``@scope/pkg`` -> ``@scope%2Fpkg``).
    """
    if name.startswith("@"):
        return "@" + quote(name[1:], safe="")
    return quote(name, safe="")


class RegistryClient:
    """Thin async wrapper around the npm registry HTTP API."""

    def __init__(
        self,
        base_url: str = "https://registry.npmjs.org",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json"},
            timeout=15.0,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RegistryClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def get_version_metadata(self, name: str, version: str) -> dict[str, Any]:
        """Return the registry document for ``name@version``.

        Raises :class:`RegistryError` on transport errors, non-2xx responses,
        or a body that is not a JSON object.
        """
        path = f"/{encode_package_name(name)}/{quote(version, safe='')}"
        try:
            resp = await self._client.get(path)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise RegistryError(name, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise RegistryError(name, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise RegistryError(name, "invalid JSON response") from exc

        if not isinstance(data, dict):
            raise RegistryError(name, "unexpected response shape")
        return data

    async def get_node_engine(self, name: str, version: str) -> str | None:
        """Return ``engines.node`` declared by ``name@version``, if any."""
        data = await self.get_version_metadata(name, version)
        engines = data.get("engines")
        if not isinstance(engines, dict):
            return None
        node = engines.get("node")
        return node if isinstance(node, str) and node else None
