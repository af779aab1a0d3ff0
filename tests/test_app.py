"""
Tests for the command line entry point
"""
import json
from unittest.mock import patch

import app
from utils import FetchError


@patch('app.setup_logging')
@patch('app.SEOAnalyzer')
def test_analyze_url_prints_report(mock_analyzer_cls, mock_logging, capsys, sample_report):
    mock_analyzer_cls.return_value.analyze_url.return_value = sample_report

    exit_code = app.main(["analyze-url", "https://example.com"])

    assert exit_code == 0
    mock_analyzer_cls.return_value.analyze_url.assert_called_once_with("https://example.com")
    assert json.loads(capsys.readouterr().out) == sample_report.to_dict()


@patch('app.setup_logging')
@patch('app.SEOAnalyzer')
def test_analyze_url_fetch_failure(mock_analyzer_cls, mock_logging, capsys):
    mock_analyzer_cls.return_value.analyze_url.side_effect = FetchError("Could not fetch")

    exit_code = app.main(["analyze-url", "https://example.com"])

    assert exit_code == 1
    assert "Failed to fetch SEO data" in capsys.readouterr().err


@patch('app.setup_logging')
def test_analyze_url_empty(mock_logging, capsys):
    exit_code = app.main(["analyze-url", ""])

    assert exit_code == 2
    assert "URL is required" in capsys.readouterr().err


@patch('app.setup_logging')
@patch('app.uvicorn.run')
def test_server_command(mock_run, mock_logging):
    exit_code = app.main(["server", "--port", "9000"])

    assert exit_code == 0
    assert mock_run.call_args.args[0] == "api:app"
    assert mock_run.call_args.kwargs["port"] == 9000


def test_no_command_prints_help(capsys):
    assert app.main([]) == 1
    assert "analyze-url" in capsys.readouterr().out
