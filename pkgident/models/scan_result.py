from dataclasses import dataclass
from dataclasses import replace
from typing import Any

from pkgident.services.identity_resolver import PackageInfo


@dataclass(frozen=True)
class LayerDetails:
    """The container image layer a package was found in."""
    index: int
    diff_id: str = ''
    chain_id: str = ''
    command: str = ''
    in_base_image: bool = False


@dataclass(frozen=True)
class PackageScanResult:
    """A resolved package together with what the scan found about it."""
    package_info: PackageInfo
    # OSV records, kept as plain dicts
    vulnerabilities: tuple[dict[str, Any], ...] = ()
    licenses: tuple[str, ...] = ()
    layer_details: LayerDetails | None = None

    def with_vulnerabilities(self, vulnerabilities: list[dict[str, Any]]) -> 'PackageScanResult':
        return replace(self, vulnerabilities=tuple(vulnerabilities))

    def with_licenses(self, licenses: list[str]) -> 'PackageScanResult':
        return replace(self, licenses=tuple(licenses))

    def to_dict(self) -> dict[str, Any]:
        data = self.package_info.to_dict()
        data['vulnerabilities'] = [v.get('id', '') for v in self.vulnerabilities]
        data['licenses'] = list(self.licenses)
        if self.layer_details is not None:
            data['layer_index'] = self.layer_details.index
        return data
