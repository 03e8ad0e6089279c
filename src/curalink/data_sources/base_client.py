"""
Base client for all external data source clients.

Provides: lazy aiohttp session management, structured request logging,
and uniform failure reporting. There is no caching, retry or
rate limiting: any failed call is terminal for the request that issued it.
"""

import asyncio
import json
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import aiohttp
from pydantic import BaseModel

from curalink.constants import DEFAULT_TIMEOUT

logger = logging.getLogger("curalink.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Transport settings shared by every upstream client."""

    timeout_seconds: float = DEFAULT_TIMEOUT
    user_agent: str | None = None


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "orcid", "pubmed"
    method: str  # e.g. "search_profiles"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for the PubMed, ClinicalTrials.gov, ORCID, SerpApi,
    Europe PMC, Semantic Scholar and NIH RePORTER clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()` or `_rest_post()`.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'clinical_trials'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            headers = {}
            if self.config.user_agent:
                headers["User-Agent"] = self.config.user_agent
            self._session = aiohttp.ClientSession(timeout=timeout, headers=headers)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request ----------------------------------------------------------

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        context: RequestContext | None = None,
    ) -> Any:
        """
        Make a single HTTP request and return the decoded JSON body.

        Parameters
        ----------
        method : str
            HTTP method, "GET" or "POST".
        url : str
            Full URL.
        params : dict, optional
            Query string parameters.
        json_body : dict, optional
            JSON body (for POST).
        headers : dict, optional
            Additional HTTP headers.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        DataSourceError
            On timeout, connection failure, any status >= 400, or a body
            that is not a valid JSON object.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        logger.info("Request [%s.%s] %s url=%s", ctx.source, ctx.method, method, url)

        try:
            session = await self._get_session()
            if method.upper() == "GET":
                resp = await session.get(url, params=params, headers=headers)
            else:
                resp = await session.post(
                    url, json=json_body, params=params, headers=headers
                )

            if resp.status >= 400:
                body = await resp.text()
                logger.warning(
                    "HTTP %d from %s.%s: %s",
                    resp.status,
                    ctx.source,
                    ctx.method,
                    body[:200],
                )
                raise DataSourceError(
                    ctx.source,
                    f"HTTP {resp.status}: {body[:500]}",
                    status_code=resp.status,
                )

            data = await resp.json(content_type=None)

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise DataSourceError(ctx.source, f"Timeout after {elapsed:.1f}s")

        except aiohttp.ClientError as e:
            logger.warning("Connection error [%s.%s]: %s", ctx.source, ctx.method, e)
            raise DataSourceError(ctx.source, f"Connection error: {e}") from e

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Malformed body [%s.%s]: %s", ctx.source, ctx.method, e)
            raise DataSourceError(ctx.source, f"Malformed JSON body: {e}") from e

        if data is None:
            raise DataSourceError(ctx.source, "Empty response body")
        if not isinstance(data, dict):
            logger.warning(
                "Unexpected response shape [%s.%s]: %s",
                ctx.source,
                ctx.method,
                type(data).__name__,
            )
            raise DataSourceError(ctx.source, "Unexpected response shape")

        logger.info(
            "Success [%s.%s] elapsed=%.2fs",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
        )
        return data

    @contextmanager
    def _parsing(self, method: str) -> Iterator[None]:
        """Report a decoded body whose nested nodes have the wrong shape."""
        try:
            yield
        except (AttributeError, TypeError, KeyError, ValueError) as e:
            logger.warning(
                "Unexpected response shape [%s.%s]: %s", self._source_name, method, e
            )
            raise DataSourceError(self._source_name, "Unexpected response shape") from e

    # -- Convenience methods for subclasses ----------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        headers: dict[str, str] | None = None,
        context: RequestContext | None = None,
    ) -> Any:
        """Convenience wrapper for REST GET requests."""
        return await self._request(
            "GET", url, params=params, headers=headers, context=context
        )

    async def _rest_post(
        self,
        url: str,
        json_body: dict[str, Any],
        *,
        headers: dict[str, str] | None = None,
        context: RequestContext | None = None,
    ) -> Any:
        """Convenience wrapper for JSON POST requests (NIH RePORTER)."""
        return await self._request(
            "POST",
            url,
            json_body=json_body,
            headers={"Content-Type": "application/json", **(headers or {})},
            context=context,
        )
