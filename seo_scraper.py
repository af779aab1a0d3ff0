"""
Main SEO Analyzer - Orchestrates fetch, extraction, providers and rating
"""
import asyncio
import logging
from datetime import datetime
from typing import Sequence, Union

from config import SEOConfig, config as default_config
from content_analyzer import ContentAnalyzer
from models import AnalysisRequest, OnPageData, SEOReport
from providers import AsyncHTTPClient, BaseProvider, build_providers
from rating import calculate_rating
from utils import PerformanceMonitor

logger = logging.getLogger(__name__)


class SEOAnalyzer:
    """Runs the single-URL analysis pipeline and assembles an SEOReport"""

    def __init__(self, settings: SEOConfig = None, content_analyzer: ContentAnalyzer = None,
                 providers: Sequence[BaseProvider] = None):
        self.config = settings or default_config
        self.content_analyzer = content_analyzer or ContentAnalyzer(self.config)
        self.performance_provider, self.social_provider, self.search_provider = (
            providers or build_providers(self.config)
        )
        logger.info("SEO Analyzer initialized successfully")

    def _load_on_page(self, url: str) -> OnPageData:
        html = self.content_analyzer.fetch_html(url)
        return self.content_analyzer.extract_on_page(html)

    def _http_client(self) -> AsyncHTTPClient:
        return AsyncHTTPClient(
            timeout=self.config.provider_timeout,
            user_agent=self.config.user_agent,
        )

    async def analyze(self, request: Union[AnalysisRequest, str]) -> SEOReport:
        """Analyze one URL.

        Raises RequestValidationError for an empty URL (before any network
        call) and FetchError / ExtractionError when the page itself cannot be
        retrieved or parsed. Provider failures never raise; they show up as
        unavailable results inside the report.
        """
        if not isinstance(request, AnalysisRequest):
            request = AnalysisRequest(request)
        url = request.target_url

        monitor = PerformanceMonitor()
        monitor.start_timer(f"analyze {url}")
        logger.info(f"Starting SEO analysis for {url}")

        # Fetching and parsing both block; keep them off the event loop
        loop = asyncio.get_running_loop()
        on_page = await loop.run_in_executor(None, self._load_on_page, url)

        async with self._http_client() as client:
            performance, social, search = await asyncio.gather(
                self.performance_provider.fetch(client, url),
                self.social_provider.fetch(client, url),
                self.search_provider.fetch(client, url),
            )

        rating = calculate_rating(performance, on_page)

        report = SEOReport(
            url=url,
            on_page=on_page,
            performance=performance,
            social=social,
            search=search,
            rating=rating,
            timestamp=datetime.now().isoformat(),
        )

        degraded = [r.provider for r in (performance, social, search) if not r.available]
        if degraded:
            logger.warning(f"Providers unavailable for {url}: {', '.join(degraded)}")
        monitor.end_timer(f"analyze {url}")
        logger.info(f"SEO Data: {report.to_dict()}")
        return report

    def analyze_url(self, url: str) -> SEOReport:
        """Synchronous wrapper around analyze()"""
        return asyncio.run(self.analyze(url))
