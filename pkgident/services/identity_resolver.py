import re
from typing import Any

from pkgident.models.ecosystem import Ecosystem
from pkgident.models.ecosystem import parse_ecosystem
from pkgident.models.ecosystem import ParsedEcosystem
from pkgident.models.metadata import ApkMetadata
from pkgident.models.metadata import DpkgMetadata
from pkgident.models.metadata import JavaArchiveMetadata
from pkgident.models.metadata import LockfileMetadata
from pkgident.models.metadata import OS_METADATA
from pkgident.models.record import RawRecord
from pkgident.models.semverlike import parse_semver_like
from pkgident.models.source_type import SourceType
from pkgident.services.purl_service import OverrideIdentity
from pkgident.services.purl_service import purl_to_identity
from pkgident.services.source_classifier import classify_extractor

GO_STDLIB_NAME = 'stdlib'
GO_TOOLCHAIN_NAME = 'go'

# Go releases before 1.21 have no patch number in go.mod; treat them as the
# newest patch of that minor release.
GO_STDLIB_ASSUMED_PATCH = 99

_PYPI_SEPARATORS = re.compile(r'[-_.]+')


def normalize_pypi_name(name: str) -> str:
    """PEP 503 name normalization."""
    return _PYPI_SEPARATORS.sub('-', name).lower()


class PackageInfo:
    """
    Canonical view over a single extractor record.

    The record is never modified. All accessors are read-only and derived from
    the record plus, for SBOM records, an identity recovered from the purl
    when the resolver is built.
    """

    def __init__(self, record: RawRecord, override: OverrideIdentity | None = None):
        self._record = record
        self._override = override

        ecosystem_str = override.ecosystem if override else record.ecosystem
        result = parse_ecosystem(ecosystem_str)
        self._ecosystem = result.parsed
        self._warnings = tuple(result.warnings)

    @classmethod
    def from_record(cls, record: RawRecord) -> 'PackageInfo':
        """Wrap a record, recovering the purl identity for SBOM-sourced records."""
        override = None
        if record.extractor is not None and classify_extractor(record.extractor.name) == SourceType.SBOM:
            purl = record.extractor.to_purl(record)
            if purl:
                try:
                    override = purl_to_identity(purl)
                except ValueError:
                    override = None
        return cls(record, override)

    def __repr__(self) -> str:
        return f"PackageInfo(name={self.name!r}, ecosystem={str(self.ecosystem)!r}, version={self.version!r})"

    @property
    def record(self) -> RawRecord:
        return self._record

    @property
    def override(self) -> OverrideIdentity | None:
        """Identity recovered from the SBOM purl, fixed when the resolver is built."""
        return self._override

    @property
    def warnings(self) -> tuple[str, ...]:
        """Diagnostics from wrapping the record, e.g. an unknown ecosystem."""
        return self._warnings

    @property
    def name(self) -> str:
        if self.override is not None:
            return self.override.name

        raw_name = self.record.name
        ecosystem = self.ecosystem.ecosystem

        if ecosystem == Ecosystem.GO and raw_name == GO_TOOLCHAIN_NAME:
            return GO_STDLIB_NAME

        if ecosystem == Ecosystem.PYPI:
            return normalize_pypi_name(raw_name)

        metadata = self.record.metadata
        if isinstance(metadata, JavaArchiveMetadata):
            if metadata.group_id and metadata.artifact_id:
                return f"{metadata.group_id}:{metadata.artifact_id}"

        # OSV lists distro advisories under the source package
        if isinstance(metadata, DpkgMetadata) and metadata.source_name:
            return metadata.source_name
        if isinstance(metadata, ApkMetadata) and metadata.origin_name:
            return metadata.origin_name

        return raw_name

    @property
    def ecosystem(self) -> ParsedEcosystem:
        return self._ecosystem

    @property
    def version(self) -> str:
        if self.override is not None:
            return self.override.version

        if self.ecosystem.ecosystem == Ecosystem.GO and self.name == GO_STDLIB_NAME:
            v = parse_semver_like(self.record.version, 3)
            if len(v.components) == 2:
                return f"{v.fetch(0)}.{v.fetch(1)}.{GO_STDLIB_ASSUMED_PATCH}"

        return self.record.version

    @property
    def location(self) -> str:
        if self.record.locations:
            return self.record.locations[0]
        return ''

    @property
    def commit(self) -> str:
        if self.record.source_code is not None:
            return self.record.source_code.commit
        return ''

    @property
    def source_type(self) -> SourceType:
        if self.record.extractor is None:
            return SourceType.UNKNOWN
        return classify_extractor(self.record.extractor.name)

    @property
    def dep_groups(self) -> list[str]:
        if isinstance(self.record.metadata, LockfileMetadata):
            return self.record.metadata.dep_groups()
        return []

    @property
    def os_package_name(self) -> str:
        """Binary package name, even where `name` reports the source package."""
        if isinstance(self.record.metadata, OS_METADATA):
            return self.record.metadata.package_name
        return ''

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'ecosystem': str(self.ecosystem),
            'version': self.version,
            'location': self.location,
            'commit': self.commit,
            'source_type': self.source_type.value,
            'dep_groups': self.dep_groups,
            'os_package_name': self.os_package_name,
        }
