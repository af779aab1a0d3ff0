"""
Utility functions for error handling, normalization and timing
"""
import time
import logging
from typing import Any, Iterable, Optional

perf_logger = logging.getLogger("performance")


class RequestValidationError(ValueError):
    """Raised when an analysis request is missing required input"""


class AnalysisError(Exception):
    """Base class for failures that abort an analysis"""


class FetchError(AnalysisError):
    """Raised when the target document could not be retrieved"""


class ExtractionError(AnalysisError):
    """Raised when the fetched document cannot be parsed at all"""


class ProviderError(Exception):
    """Raised inside a provider adapter; never escapes the adapter"""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message


def safe_extract_text(element, default: str = "") -> str:
    """Text content of a BeautifulSoup element, or default when missing or empty"""
    try:
        if element:
            text = element.get_text()
            return text if text else default
        return default
    except Exception:
        return default


def safe_extract_attribute(element, attribute: str, default: str = "") -> str:
    """Attribute of a BeautifulSoup element, or default when missing or empty"""
    try:
        if element:
            value = element.get(attribute)
            if isinstance(value, list):
                value = " ".join(value)
            return value if value else default
        return default
    except Exception:
        return default


def dig(data: Any, *path: str, default: Any = None) -> Any:
    """Walk nested dicts by key, returning default at the first missing step"""
    current = data
    for key in path:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current if current is not None else default


def first_non_empty(candidates: Iterable[Any], default: Any = None) -> Any:
    """First candidate that is not None, "" or an empty container; whitespace counts as a value"""
    for candidate in candidates:
        if candidate is None:
            continue
        if isinstance(candidate, (str, list, dict)) and not candidate:
            continue
        return candidate
    return default


def coerce_int(value: Any, default: int = 0, minimum: Optional[int] = None) -> int:
    """Best-effort int conversion ("1,230" -> 1230) with an optional floor"""
    if isinstance(value, bool):
        result = default
    elif isinstance(value, int):
        result = value
    elif isinstance(value, float):
        result = int(value)
    elif isinstance(value, str):
        try:
            result = int(value.replace(",", "").strip())
        except ValueError:
            result = default
    else:
        result = default

    if minimum is not None and result < minimum:
        return default
    return result


# Performance monitoring utilities
class PerformanceMonitor:
    """Monitor and log performance metrics"""

    def __init__(self):
        self.metrics = {}

    def start_timer(self, operation: str):
        """Start timing an operation"""
        self.metrics[operation] = {'start': time.time()}

    def end_timer(self, operation: str) -> float:
        """End timing and log results"""
        if operation in self.metrics:
            duration = time.time() - self.metrics[operation]['start']
            self.metrics[operation]['duration'] = duration
            perf_logger.info(f"Operation '{operation}' completed in {duration:.2f} seconds")
            return duration
        return 0

    def get_metrics(self) -> dict:
        """Get all recorded metrics"""
        return self.metrics.copy()
