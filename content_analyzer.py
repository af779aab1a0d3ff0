"""
Content analysis module for SEO Analyzer: document fetch and on-page extraction
"""
import requests
import logging
from bs4 import BeautifulSoup

from config import SEOConfig, config as default_config
from models import NOT_FOUND, OnPageData
from utils import FetchError, ExtractionError, safe_extract_text, safe_extract_attribute

logger = logging.getLogger(__name__)


class ContentAnalyzer:
    """Fetches a page and extracts its on-page SEO fields"""

    def __init__(self, settings: SEOConfig = None):
        self.config = settings or default_config
        self.headers = {
            'User-Agent': self.config.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

    def fetch_html(self, url: str) -> str:
        """Retrieve the raw document body; raises FetchError on any failure"""
        logger.info(f"Fetching document: {url}")

        # One session per fetch: cookies must not leak between analyses
        try:
            with requests.Session() as session:
                session.headers.update(self.headers)
                response = session.get(url, timeout=self.config.request_timeout)
                response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout fetching {url}")
            raise FetchError(f"Timed out fetching {url}") from e
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP {e.response.status_code if e.response is not None else '?'} for {url}")
            raise FetchError(f"Bad status fetching {url}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for {url}: {e}")
            raise FetchError(f"Could not fetch {url}") from e

        logger.debug(f"Fetched {len(response.text)} characters from {url}")
        return response.text

    def extract_on_page(self, html: str) -> OnPageData:
        """Parse HTML and pull out title, meta description, h1 tags and canonical link"""
        if not isinstance(html, (str, bytes)):
            raise ExtractionError(f"Expected document text, got {type(html).__name__}")

        try:
            soup = BeautifulSoup(html, 'html.parser')
        except Exception as e:
            raise ExtractionError(f"Could not parse document: {e}") from e

        on_page = OnPageData(
            page_title=self._extract_title(soup),
            meta_description=self._extract_meta_description(soup),
            h1_tags=self._extract_h1_tags(soup),
            canonical_tag=self._extract_canonical_url(soup),
        )

        logger.info(f"Extracted on-page data: title={on_page.page_title!r}, {len(on_page.h1_tags)} H1 tags")
        return on_page

    def _extract_title(self, soup) -> str:
        """Extract page title"""
        return safe_extract_text(soup.find('title'), NOT_FOUND)

    def _extract_meta_description(self, soup) -> str:
        """Extract meta description"""
        meta_desc = soup.find('meta', attrs={'name': 'description'})
        return safe_extract_attribute(meta_desc, 'content', NOT_FOUND)

    def _extract_h1_tags(self, soup) -> tuple:
        return tuple(h1.get_text() for h1 in soup.find_all('h1'))

    def _extract_canonical_url(self, soup) -> str:
        """Extract canonical URL"""
        canonical = soup.find('link', rel='canonical')
        return safe_extract_attribute(canonical, 'href', NOT_FOUND)
