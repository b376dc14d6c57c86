import pytest

from pkgident.core.config import PkgIdentConfig
from pkgident.core.config import ScanConfig


def test_scan_config_defaults(monkeypatch):
    monkeypatch.delenv('PKGIDENT_WORKERS', raising=False)
    monkeypatch.delenv('PKGIDENT_REPORT_WARNINGS', raising=False)
    config = ScanConfig()
    assert config.workers == 4
    assert config.report_warnings is True


def test_workers_from_env(monkeypatch):
    monkeypatch.setenv('PKGIDENT_WORKERS', '8')
    assert ScanConfig().workers == 8


@pytest.mark.parametrize('raw', ['0', '-3'])
def test_workers_at_least_one(monkeypatch, raw):
    monkeypatch.setenv('PKGIDENT_WORKERS', raw)
    assert ScanConfig().workers == 1


def test_blank_workers_uses_default(monkeypatch):
    monkeypatch.setenv('PKGIDENT_WORKERS', ' ')
    assert ScanConfig().workers == 4


def test_non_integer_workers_is_a_clear_error(monkeypatch):
    monkeypatch.setenv('PKGIDENT_WORKERS', 'lots')
    with pytest.raises(ValueError, match="PKGIDENT_WORKERS must be an integer, got 'lots'"):
        PkgIdentConfig.load()


def test_report_warnings_can_be_disabled(monkeypatch):
    monkeypatch.setenv('PKGIDENT_REPORT_WARNINGS', 'false')
    assert ScanConfig().report_warnings is False
