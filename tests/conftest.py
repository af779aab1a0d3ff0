"""
Pytest configuration and shared fixtures
"""
import pytest
import os
from unittest.mock import Mock, AsyncMock

# Add project root to path
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import SEOConfig
from models import (
    OnPageData, OrganicResult, Pagination, ProviderResult,
    SEOReport, SearchResults, SocialMetadata,
)


@pytest.fixture
def test_config():
    """Test configuration with fake credentials"""
    return SEOConfig(
        page_speed_api_key="ps-key",
        opengraph_api_key="og-key",
        serp_api_key="serp-key",
        request_timeout=5,
        provider_timeout=2,
        log_dir="test-logs",
    )


@pytest.fixture
def sample_html():
    """Page with every on-page field present"""
    return """
    <html>
        <head>
            <title>Test Page</title>
            <meta name="description" content="Test description">
            <link rel="canonical" href="https://example.com/page">
            <meta name="viewport" content="width=device-width, initial-scale=1">
        </head>
        <body>
            <h1>Main Heading</h1>
            <h2>Sub Heading</h2>
            <p>Test content with some words for analysis.</p>
            <h1>Second Heading</h1>
        </body>
    </html>
    """


@pytest.fixture
def bare_html():
    """Page with none of the on-page fields"""
    return "<html><head></head><body><p>Nothing to see</p></body></html>"


@pytest.fixture
def pagespeed_payload():
    return {
        "id": "https://example.com/",
        "lighthouseResult": {
            "categories": {
                "performance": {"id": "performance", "score": 0.87}
            }
        }
    }


@pytest.fixture
def opengraph_payload():
    return {
        "hybridGraph": {
            "title": "Hybrid Title",
            "description": "Hybrid description",
            "image": "https://example.com/hybrid.png",
            "url": "https://example.com/",
        },
        "openGraph": {
            "title": "Raw Title",
            "image": {"url": "https://example.com/raw.png"},
        },
        "htmlInferred": {
            "title": "Inferred Title",
        },
    }


@pytest.fixture
def serp_payload():
    return {
        "search_parameters": {"q": "https://example.com", "engine": "google"},
        "search_information": {"total_results": 1230},
        "organic_results": [
            {
                "position": 1,
                "title": "Example Domain",
                "link": "https://example.com/",
                "snippet": "This domain is for use in examples.",
                "displayed_link": "example.com",
            },
            {
                "position": 2,
                "title": "Example - Wikipedia",
                "link": "https://en.wikipedia.org/wiki/Example",
                "snippet": "Example may refer to...",
            },
        ],
        "pagination": {
            "current": 1,
            "next": "https://www.google.com/search?q=https://example.com&start=10",
        },
    }


@pytest.fixture
def mock_response(sample_html):
    """Mock HTTP response"""
    mock = Mock()
    mock.status_code = 200
    mock.text = sample_html
    mock.raise_for_status = Mock()
    return mock


@pytest.fixture
def make_provider():
    """Factory for provider doubles"""
    def _make(name, result=None):
        provider = Mock()
        provider.name = name
        provider.fetch = AsyncMock(return_value=result or ProviderResult.unavailable(name, "not configured"))
        return provider
    return _make


@pytest.fixture
def sample_report():
    """Fully populated report"""
    return SEOReport(
        url="https://example.com",
        on_page=OnPageData(
            page_title="Test Page",
            meta_description="Test description",
            h1_tags=("Main Heading",),
            canonical_tag="https://example.com/page",
        ),
        performance=ProviderResult.success("pagespeed", 87.0),
        social=ProviderResult.success("opengraph", SocialMetadata(
            title="Hybrid Title",
            description="Hybrid description",
            image="https://example.com/hybrid.png",
            url="https://example.com/",
        )),
        search=ProviderResult.success("serp", SearchResults(
            query="https://example.com",
            total_results=1230,
            organic_results=[
                OrganicResult(position=1, title="Example Domain",
                              link="https://example.com/", snippet="Examples."),
            ],
            pagination=Pagination(current_page=1, next_page=None),
        )),
        rating=10.0,
        timestamp="2026-01-01T00:00:00",
    )
