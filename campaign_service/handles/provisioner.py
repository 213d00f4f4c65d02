"""
Handle Provisioners

CrudCrud has no API for creating a bucket. Visiting its homepage mints a
new resource id and embeds it somewhere in the markup, so the default
provisioner scrapes that page with an ordered list of patterns, most
specific first, and keeps the first candidate that passes the format check.
Any markup change upstream can break this; the only outcome then is a
ProvisionError.

ManualProvisioner is the fallback used by operators: it asks a person to
paste an id copied from the homepage.
"""

import asyncio
import logging
import re
from typing import Callable, Iterable, List, Optional, Pattern

import httpx

from ..clients.discovery_client import DiscoveryClient
from ..models import is_valid_handle
from ..protocols import ProvisionError

logger = logging.getLogger(__name__)

_HEX_ID = r"([a-f0-9]{32,})"


def build_extraction_patterns(provider_host: str = "crudcrud.com") -> List[Pattern]:
    """
    Extraction patterns, most specific first.

    1. Full URL form:   crudcrud.com/api/<id>
    2. Path form:       api/<id>
    3. Quoted token:    "<id>"
    """
    return [
        re.compile(re.escape(provider_host) + r"/api/" + _HEX_ID, re.IGNORECASE),
        re.compile(r"api/" + _HEX_ID, re.IGNORECASE),
        re.compile(r'"' + _HEX_ID + r'"', re.IGNORECASE),
    ]


DEFAULT_EXTRACTION_PATTERNS = build_extraction_patterns()


def extract_handle(document: str, patterns: Iterable[Pattern] = DEFAULT_EXTRACTION_PATTERNS) -> Optional[str]:
    """Return the first pattern match that is a well-formed handle"""
    for pattern in patterns:
        for match in pattern.finditer(document):
            candidate = match.group(1)
            if is_valid_handle(candidate):
                return candidate
    return None


class HtmlDiscoveryProvisioner:
    """Provisions a handle by scraping the discovery page"""

    def __init__(
        self,
        discovery_client: DiscoveryClient,
        patterns: Optional[Iterable[Pattern]] = None,
    ):
        self.discovery_client = discovery_client
        self.patterns = list(patterns) if patterns is not None else list(DEFAULT_EXTRACTION_PATTERNS)

    async def provision(self) -> str:
        """
        Fetch the discovery page and extract a new handle.

        Returns:
            Fresh handle

        Raises:
            ProvisionError: Endpoint unreachable, non-2xx, or no id in the body
        """
        logger.info("Fetching new resource id from CrudCrud...")

        try:
            document = await self.discovery_client.fetch_document()
        except httpx.HTTPError as e:
            raise ProvisionError(f"Discovery endpoint unreachable: {e!r}") from e

        handle = extract_handle(document, self.patterns)
        if handle is None:
            raise ProvisionError("Could not extract resource id from CrudCrud homepage HTML")

        logger.info(f"Fetched new resource id {handle}")
        return handle


MANUAL_INSTRUCTIONS = """\
CrudCrud Resource ID Needed

Your current resource ID has expired or is invalid.

To get a new resource ID:
1. Visit https://crudcrud.com in a browser
2. Copy the resource ID from the URL (the part after /api/)
3. Paste it below

Example: if you see https://crudcrud.com/api/abc123def456...
copy: abc123def456...
"""


class ManualProvisioner:
    """Provisions a handle by asking an operator to paste one"""

    def __init__(
        self,
        prompt: Callable[[str], Optional[str]] = input,
        instructions: str = MANUAL_INSTRUCTIONS,
    ):
        self.prompt = prompt
        self.instructions = instructions

    async def provision(self) -> str:
        # The prompt blocks, so it runs off the event loop
        loop = asyncio.get_running_loop()
        value = await loop.run_in_executor(None, self.prompt, self.instructions + "\nResource ID: ")
        value = (value or "").strip()

        if not value:
            raise ProvisionError("Resource id entry cancelled")
        if not is_valid_handle(value):
            raise ProvisionError(
                "Invalid resource id format. Expected 32+ character hex string."
            )
        return value


__all__ = [
    "build_extraction_patterns",
    "DEFAULT_EXTRACTION_PATTERNS",
    "extract_handle",
    "HtmlDiscoveryProvisioner",
    "ManualProvisioner",
    "MANUAL_INSTRUCTIONS",
]
