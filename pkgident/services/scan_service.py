from concurrent.futures import ThreadPoolExecutor

import structlog

from pkgident.core.config import get_config
from pkgident.core.stats import ResolveStats
from pkgident.models.record import RawRecord
from pkgident.models.scan_result import PackageScanResult
from pkgident.services.identity_resolver import PackageInfo

logger = structlog.get_logger('scan_service')


class ScanService:
    """Resolves batches of extractor records into canonical package identities."""

    def __init__(self, workers: int | None = None, report_warnings: bool | None = None):
        config = get_config()
        self.workers = max(1, config.scan.workers if workers is None else workers)
        self.report_warnings = config.scan.report_warnings if report_warnings is None else report_warnings

    def resolve_record(self, record: RawRecord, stats: ResolveStats) -> PackageScanResult:
        """Wrap one record; each call builds its own resolver."""
        pkg = PackageInfo.from_record(record)

        if pkg.override is not None:
            stats.inc_overridden()

        for warning in pkg.warnings:
            stats.inc_warnings()
            if self.report_warnings:
                logger.warning(
                    warning,
                    package=record.name,
                    location=pkg.location,
                )

        stats.inc_resolved()
        return PackageScanResult(package_info=pkg)

    def resolve_records(self, records: list[RawRecord], stats: ResolveStats | None = None) -> list[PackageScanResult]:
        """Resolve all records in parallel. Results keep the input order."""
        if stats is None:
            stats = ResolveStats()
        stats.total += len(records)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            results = list(
                executor.map(
                    lambda record: self.resolve_record(record, stats), records,
                ),
            )

        logger.debug(
            'Resolved records',
            total=stats.total,
            overridden=stats.overridden,
            warnings=stats.warnings,
            elapsed=f"{stats.elapsed_time:.3f}s",
        )
        return results
