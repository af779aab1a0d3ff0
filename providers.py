"""
Async provider adapters for performance, social metadata and search results
"""
import asyncio
import aiohttp
import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from config import SEOConfig
from models import (
    NOT_FOUND, OrganicResult, Pagination, ProviderResult,
    SearchResults, SocialMetadata,
)
from utils import ProviderError, coerce_int, dig, first_non_empty

logger = logging.getLogger(__name__)

PAGESPEED_API_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
OPENGRAPH_API_URL = "https://opengraph.io/api/1.1/site/{url}"
SERP_API_URL = "https://serpapi.com/search.json"


class AsyncHTTPClient:
    """Async JSON client shared by the providers of one analysis"""

    def __init__(self, timeout: float = 10.0, max_concurrent: int = 10, user_agent: str = None):
        self.timeout = timeout
        self.max_concurrent = max_concurrent
        self.user_agent = user_agent
        self.session = None

    async def __aenter__(self):
        connector = aiohttp.TCPConnector(
            limit=self.max_concurrent,
            ttl_dns_cache=300,
        )
        headers = {'Accept': 'application/json'}
        if self.user_agent:
            headers['User-Agent'] = self.user_agent

        self.session = aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers=headers,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def get_json(self, url: str, params: Dict[str, str] = None) -> Any:
        """GET a JSON document; raises on timeout, transport error or non-2xx status"""
        if self.session is None:
            raise RuntimeError("AsyncHTTPClient used outside of 'async with'")

        async with self.session.get(url, params=params) as response:
            if response.status >= 400:
                raise aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=response.status,
                    message=response.reason or "",
                )
            return await response.json(content_type=None)


class BaseProvider:
    """Fail-soft adapter around one external SEO data provider.

    Subclasses supply the request (``build_request``) and the normalization of
    the provider's JSON (``normalize``). ``fetch`` never raises: every failure
    is logged and returned as an unavailable ``ProviderResult``.
    """

    name = "provider"

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key

    def build_request(self, target_url: str) -> Tuple[str, Dict[str, str]]:
        raise NotImplementedError

    def normalize(self, data: Any) -> Any:
        raise NotImplementedError

    async def fetch(self, client: AsyncHTTPClient, target_url: str) -> ProviderResult:
        try:
            if not self.api_key:
                raise ProviderError(self.name, "API key is not configured")

            endpoint, params = self.build_request(target_url)
            data = await client.get_json(endpoint, params=params)
            if not isinstance(data, dict):
                raise ProviderError(self.name, f"unexpected response type {type(data).__name__}")

            value = self.normalize(data)
            logger.info(f"[{self.name}] data retrieved for {target_url}")
            return ProviderResult.success(self.name, value)

        except asyncio.TimeoutError:
            logger.error(f"Error fetching {self.name} data: request timed out")
            return ProviderResult.unavailable(self.name, "timeout")
        except ProviderError as e:
            logger.error(f"Error fetching {self.name} data: {e.message}")
            return ProviderResult.unavailable(self.name, e.message)
        except Exception as e:
            logger.error(f"Error fetching {self.name} data: {e}")
            return ProviderResult.unavailable(self.name, str(e) or type(e).__name__)


class PageSpeedProvider(BaseProvider):
    """Google PageSpeed Insights performance score, as a 0-100 number"""

    name = "pagespeed"

    def build_request(self, target_url):
        return PAGESPEED_API_URL, {"url": target_url, "key": self.api_key}

    def normalize(self, data) -> float:
        score = dig(data, "lighthouseResult", "categories", "performance", "score")
        if score is None:
            raise ProviderError(self.name, "performance score missing from response")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ProviderError(self.name, f"performance score is not numeric: {score!r}")
        if not 0 <= score <= 1:
            raise ProviderError(self.name, f"performance score out of range: {score!r}")
        return round(score * 100, 2)


class OpenGraphProvider(BaseProvider):
    """OpenGraph.io metadata, resolved hybrid > raw Open Graph > HTML-inferred"""

    name = "opengraph"
    BLOCKS = ("hybridGraph", "openGraph", "htmlInferred")
    FIELDS = ("title", "description", "image", "url")

    def build_request(self, target_url):
        return OPENGRAPH_API_URL.format(url=quote(target_url, safe="")), {"app_id": self.api_key}

    def normalize(self, data) -> SocialMetadata:
        resolved = {
            field: self._resolve_field(data, field)
            for field in self.FIELDS
        }
        return SocialMetadata(**resolved)

    def _resolve_field(self, data: dict, field: str) -> str:
        candidates = []
        for block_name in self.BLOCKS:
            block = data.get(block_name)
            if not isinstance(block, dict):
                continue
            value = block.get(field)
            if field == "image":
                value = self._image_url(value)
            if value is not None and not isinstance(value, str):
                value = str(value)
            candidates.append(value)
        return first_non_empty(candidates, NOT_FOUND)

    @staticmethod
    def _image_url(value):
        # The raw Open Graph block reports images as {"url": ...} or a list of them
        if isinstance(value, list):
            value = value[0] if value else None
        if isinstance(value, dict):
            value = value.get("url")
        return value


class SerpProvider(BaseProvider):
    """SerpApi search results for the target URL used as the query"""

    name = "serp"

    def build_request(self, target_url):
        return SERP_API_URL, {"q": target_url, "api_key": self.api_key}

    def normalize(self, data) -> SearchResults:
        query = first_non_empty([dig(data, "search_parameters", "q")], "Unknown")
        total_results = coerce_int(dig(data, "search_information", "total_results"), 0, minimum=0)

        raw_results = data.get("organic_results") or []
        if not isinstance(raw_results, list):
            raw_results = []
        organic_results = [
            self._organic_result(index, item)
            for index, item in enumerate(raw_results, start=1)
            if isinstance(item, dict)
        ]

        pagination = Pagination(
            current_page=coerce_int(dig(data, "pagination", "current"), 1, minimum=1),
            next_page=dig(data, "pagination", "next") or None,
        )

        return SearchResults(
            query=str(query),
            total_results=total_results,
            organic_results=organic_results,
            pagination=pagination,
        )

    @staticmethod
    def _organic_result(index: int, item: dict) -> OrganicResult:
        return OrganicResult(
            position=coerce_int(item.get("position"), index),
            title=item.get("title") or "",
            link=item.get("link") or "",
            snippet=item.get("snippet") or "",
        )


def build_providers(settings: SEOConfig) -> Tuple[PageSpeedProvider, OpenGraphProvider, SerpProvider]:
    """Create the three providers with credentials from the given configuration"""
    return (
        PageSpeedProvider(settings.page_speed_api_key),
        OpenGraphProvider(settings.opengraph_api_key),
        SerpProvider(settings.serp_api_key),
    )
