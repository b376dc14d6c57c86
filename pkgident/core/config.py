"""Configuration management for pkgident."""
import os
from dataclasses import dataclass
from dataclasses import field


def _env_workers(name: str, default: int) -> int:
    """Worker count from the environment, at least 1."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class LoggingConfig:
    level: str = field(
        default_factory=lambda: os.getenv('PKGIDENT_LOG_LEVEL', 'INFO').upper(),
    )
    json: bool = field(
        default_factory=lambda: os.getenv('ENV') == 'production',
    )


@dataclass
class ScanConfig:
    """Batch resolution settings."""
    workers: int = field(default_factory=lambda: _env_workers('PKGIDENT_WORKERS', 4))
    # Log ecosystem parse warnings while resolving
    report_warnings: bool = field(
        default_factory=lambda: os.getenv(
            'PKGIDENT_REPORT_WARNINGS', '1',
        ) not in ('0', 'false', 'no'),
    )


@dataclass
class PkgIdentConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)

    @classmethod
    def load(cls) -> 'PkgIdentConfig':
        return cls()


_config: PkgIdentConfig | None = None


def get_config() -> PkgIdentConfig:
    global _config
    if _config is None:
        _config = PkgIdentConfig.load()
    return _config
