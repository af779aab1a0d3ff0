"""
Data models for SEO Analyzer
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from utils import RequestValidationError

NOT_FOUND = "Not found"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class AnalysisRequest:
    """Input for a single analysis run"""
    target_url: str

    def __post_init__(self):
        url = self.target_url.strip() if isinstance(self.target_url, str) else ""
        if not url:
            raise RequestValidationError("URL is required")
        object.__setattr__(self, "target_url", url)


@dataclass(frozen=True)
class OnPageData:
    """SEO fields extracted from the page markup"""
    page_title: str = NOT_FOUND
    meta_description: str = NOT_FOUND
    h1_tags: Tuple[str, ...] = ()
    canonical_tag: str = NOT_FOUND


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of one provider call: a normalized value, or unavailable with a reason"""
    provider: str
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, provider: str, value: Any) -> "ProviderResult":
        return cls(provider=provider, value=value)

    @classmethod
    def unavailable(cls, provider: str, error: str) -> "ProviderResult":
        return cls(provider=provider, error=error or "unknown error")

    @property
    def available(self) -> bool:
        return self.error is None

    def to_json(self) -> Any:
        if not self.available:
            return NOT_AVAILABLE
        if hasattr(self.value, "to_dict"):
            return self.value.to_dict()
        return self.value


@dataclass(frozen=True)
class SocialMetadata:
    """Social (Open Graph) metadata resolved across the provider's blocks"""
    title: str = NOT_FOUND
    description: str = NOT_FOUND
    image: str = NOT_FOUND
    url: str = NOT_FOUND

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "url": self.url,
        }


@dataclass(frozen=True)
class OrganicResult:
    """One ranked organic search result"""
    position: int
    title: str
    link: str
    snippet: str

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "title": self.title,
            "link": self.link,
            "snippet": self.snippet,
        }


@dataclass(frozen=True)
class Pagination:
    current_page: int = 1
    next_page: Optional[Union[int, str]] = None

    def to_dict(self) -> dict:
        return {"current_page": self.current_page, "next_page": self.next_page}


@dataclass(frozen=True)
class SearchResults:
    """Normalized search engine results for the target URL"""
    query: str = "Unknown"
    total_results: int = 0
    organic_results: List[OrganicResult] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "total_results": self.total_results,
            "organic_results": [r.to_dict() for r in self.organic_results],
            "pagination": self.pagination.to_dict(),
        }


@dataclass(frozen=True)
class SEOReport:
    """Aggregated analysis result for one URL"""
    url: str
    on_page: OnPageData
    performance: ProviderResult
    social: ProviderResult
    search: ProviderResult
    rating: float
    timestamp: str

    def to_dict(self) -> dict:
        """Serialize to the JSON shape returned by the API"""
        return {
            "url": self.url,
            "pageTitle": self.on_page.page_title,
            "metaDescription": self.on_page.meta_description,
            "h1Tags": list(self.on_page.h1_tags),
            "canonicalTag": self.on_page.canonical_tag,
            "pageSpeedScore": self.performance.to_json(),
            "openGraphData": self.social.to_json(),
            "serpData": self.search.to_json(),
            "rating": self.rating,
            "timestamp": self.timestamp,
        }
