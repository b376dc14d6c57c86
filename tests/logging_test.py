import io

import pytest
import structlog
from rich.console import Console

from pkgident.core.config import LoggingConfig
from pkgident.core.logging import RichConsoleRenderer


def test_renderer_prints_and_drops_event():
    buffer = io.StringIO()
    renderer = RichConsoleRenderer(console=Console(file=buffer, width=200))
    event = {
        'event': 'unknown ecosystem: Foo',
        'level': 'warning',
        'logger': 'scan_service',
        'package': 'bar',
    }

    with pytest.raises(structlog.DropEvent):
        renderer(None, 'warning', event)

    output = buffer.getvalue()
    assert 'unknown ecosystem: Foo' in output
    assert 'scan_service' in output
    assert "package='bar'" in output


def test_logging_config_from_env(monkeypatch):
    monkeypatch.setenv('PKGIDENT_LOG_LEVEL', 'debug')
    monkeypatch.setenv('ENV', 'production')
    config = LoggingConfig()
    assert config.level == 'DEBUG'
    assert config.json is True


def test_logging_config_defaults(monkeypatch):
    monkeypatch.delenv('PKGIDENT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('ENV', raising=False)
    config = LoggingConfig()
    assert config.level == 'INFO'
    assert config.json is False
