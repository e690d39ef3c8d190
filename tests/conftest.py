"""
pytest configuration and fixtures.
"""

import io

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from headerconv import ConverterConfig


@pytest.fixture
def simple_capture() -> str:
    """Minimal response header block."""
    return (
        "HTTP/1.1 200 OK\n"
        "Content-Type: text/html\n"
        "X-Cache: HIT\n"
    )


@pytest.fixture
def curl_capture() -> str:
    """Header block as printed by `curl -sI`, CRLF line endings included."""
    return (
        "HTTP/1.1 301 Moved Permanently\r\n"
        "Server: nginx/1.25.3\r\n"
        "Date: Mon, 01 Jan 2024 10:00:00 GMT\r\n"
        "Content-Type: text/html; charset=utf-8\r\n"
        "Content-Length: 162\r\n"
        "Location: https://example.com/\r\n"
        "X-Frame-Options: SAMEORIGIN\r\n"
        "Strict-Transport-Security: max-age=31536000\r\n"
        "\r\n"
    )


@pytest.fixture
def simple_stream(simple_capture: str) -> io.StringIO:
    """simple_capture as a readable stream."""
    return io.StringIO(simple_capture)


@pytest.fixture
def config() -> ConverterConfig:
    """Small test configuration."""
    return ConverterConfig(num_workers=2)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove headerconv environment variables for the test."""
    for name in ("HEADERCONV_FORMAT", "HEADERCONV_WORKERS", "HEADERCONV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
