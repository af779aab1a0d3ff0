"""
Tests for logging setup
"""
import logging
import pytest

from monitoring import setup_logging
from utils import PerformanceMonitor


@pytest.fixture
def restore_logging():
    """Put back the root, provider and performance loggers after each test"""
    saved = {
        name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level,
               logging.getLogger(name).propagate)
        for name in ("", "providers", "performance")
    }
    yield
    for name, (handlers, level, propagate) in saved.items():
        target = logging.getLogger(name)
        for handler in target.handlers:
            if handler not in handlers:
                handler.close()
        target.handlers[:] = handlers
        target.setLevel(level)
        target.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_creates_log_files(self, tmp_path, restore_logging):
        log_dir = tmp_path / "logs"

        setup_logging("DEBUG", str(log_dir))

        for filename in ("seo_api.log", "errors.log", "providers.log", "performance.log"):
            assert (log_dir / filename).exists()

    def test_root_level_from_argument(self, tmp_path, restore_logging):
        root = setup_logging("warning", str(tmp_path))

        assert root.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, tmp_path, restore_logging):
        root = setup_logging("chatty", str(tmp_path))

        assert root.level == logging.INFO

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path, restore_logging):
        setup_logging("INFO", str(tmp_path))
        first = len(logging.getLogger().handlers)
        setup_logging("INFO", str(tmp_path))

        assert len(logging.getLogger().handlers) == first
        assert len(logging.getLogger("providers").handlers) == 1
        assert len(logging.getLogger("performance").handlers) == 1

    def test_timings_go_to_performance_log_only(self, tmp_path, restore_logging):
        setup_logging("INFO", str(tmp_path))

        monitor = PerformanceMonitor()
        monitor.start_timer("analyze https://example.com")
        monitor.end_timer("analyze https://example.com")
        for handler in logging.getLogger("performance").handlers + logging.getLogger().handlers:
            handler.flush()

        assert logging.getLogger("performance").propagate is False
        assert "analyze https://example.com" in (tmp_path / "performance.log").read_text()
        assert "analyze https://example.com" not in (tmp_path / "seo_api.log").read_text()

    def test_provider_activity_goes_to_providers_log(self, tmp_path, restore_logging):
        setup_logging("INFO", str(tmp_path))

        logging.getLogger("providers").error("Error fetching serp data: timeout")
        for handler in logging.getLogger("providers").handlers + logging.getLogger().handlers:
            handler.flush()

        assert "serp data: timeout" in (tmp_path / "providers.log").read_text()
        assert "serp data: timeout" in (tmp_path / "errors.log").read_text()

    def test_noisy_loggers_quieted(self, tmp_path, restore_logging):
        setup_logging("DEBUG", str(tmp_path))

        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("aiohttp.access").level == logging.WARNING
