"""Download an OpenAPI document and read its title and description."""

from typing import Any, Optional

import httpx
import yaml

from ..config import Config
from ..errors import SpecFetchError
from ..models.responses import SpecDocument
from ..utils.logging import get_logger
from ..utils.tracing import RequestTrace

logger = get_logger(__name__)


def _normalize_key(key: Any) -> str:
    """Fold case, underscores and dashes so ``Info``/``INFO``/``in_fo`` match."""
    return str(key).replace("_", "").replace("-", "").lower()


def _lookup(mapping: Any, name: str) -> Optional[Any]:
    if not isinstance(mapping, dict):
        return None
    wanted = _normalize_key(name)
    for key, value in mapping.items():
        if _normalize_key(key) == wanted:
            return value
    return None


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def parse_spec_document(text: str) -> SpecDocument:
    """
    Decode a YAML or JSON OpenAPI document into a SpecDocument.

    Unknown fields are ignored and missing fields default to empty strings.

    Args:
        text: Raw document body

    Returns:
        Parsed SpecDocument

    Raises:
        yaml.YAMLError: If the body is not valid YAML/JSON
    """
    document = yaml.safe_load(text)
    info = _lookup(document, "info")
    return SpecDocument(
        title=_as_text(_lookup(info, "title")),
        description=_as_text(_lookup(info, "description")),
    )


class SpecFetcher:
    """
    Fetches OpenAPI documents from caller supplied URLs.

    One GET per call, no retry. Every download failure, whether a non-success
    status or a transport error, is reported with the same message.
    """

    def __init__(self, http_client: httpx.AsyncClient, app_config: Config):
        """
        Initialize the fetcher.

        Args:
            http_client: Shared pooled HTTP client
            app_config: Service configuration
        """
        self.http_client = http_client
        self.timeout = app_config.SPEC_FETCH_TIMEOUT

    async def fetch(self, url: str, trace: Optional[RequestTrace] = None) -> SpecDocument:
        """
        Download and parse the document at ``url``.

        Args:
            url: http(s) URL of the OpenAPI document
            trace: Request trace to record into

        Returns:
            Parsed SpecDocument

        Raises:
            SpecFetchError: If the document could not be downloaded
        """
        try:
            response = await self.http_client.get(
                url, timeout=self.timeout, follow_redirects=True
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to download OpenAPI document from {url}: {e}")
            if trace is not None:
                trace.record_exception(e)
            raise SpecFetchError() from e

        if trace is not None:
            trace.set_attribute("smg.spec_status_code", response.status_code)

        if not response.is_success:
            logger.warning(
                f"OpenAPI document download from {url} returned {response.status_code}"
            )
            raise SpecFetchError()

        try:
            return parse_spec_document(response.text)
        except yaml.YAMLError as e:
            # Treated like an empty document
            logger.warning(f"Could not parse OpenAPI document from {url}: {e}")
            if trace is not None:
                trace.set_attribute("smg.spec_parse_error", str(e))
            return SpecDocument()
