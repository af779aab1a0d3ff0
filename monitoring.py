"""
Logging setup for SEO Analyzer
"""
import logging
import os

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
SIMPLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Third-party loggers that drown out analysis logs at INFO
NOISY_LOGGERS = ("urllib3", "aiohttp.access", "aiohttp.client")


def _file_handler(log_dir: str, filename: str, level: int, fmt: str) -> logging.FileHandler:
    handler = logging.FileHandler(os.path.join(log_dir, filename), encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """Configure logging for the API and CLI.

    Files written under ``log_dir``:

    - ``seo_api.log``: everything at DEBUG and above
    - ``errors.log``: errors only
    - ``providers.log``: provider adapter activity, one place to see which
      external service is failing
    - ``performance.log``: analysis timings from ``PerformanceMonitor``; this
      logger does not propagate to the console
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.addHandler(_file_handler(log_dir, 'seo_api.log', logging.DEBUG, DETAILED_FORMAT))
    root_logger.addHandler(_file_handler(log_dir, 'errors.log', logging.ERROR, DETAILED_FORMAT))

    provider_logger = logging.getLogger('providers')
    provider_logger.handlers.clear()
    provider_logger.addHandler(_file_handler(log_dir, 'providers.log', logging.INFO, SIMPLE_FORMAT))

    perf_logger = logging.getLogger('performance')
    perf_logger.handlers.clear()
    perf_logger.addHandler(_file_handler(log_dir, 'performance.log', logging.INFO, SIMPLE_FORMAT))
    perf_logger.setLevel(logging.INFO)
    perf_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
