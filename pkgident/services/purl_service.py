from dataclasses import dataclass

from packageurl import PackageURL

from pkgident.models.ecosystem import Ecosystem

_PURL_ECOSYSTEMS: dict[str, Ecosystem] = {
    'cargo': Ecosystem.CRATES_IO,
    'composer': Ecosystem.PACKAGIST,
    'cran': Ecosystem.CRAN,
    'gem': Ecosystem.RUBYGEMS,
    'github': Ecosystem.GITHUB_ACTIONS,
    'golang': Ecosystem.GO,
    'hackage': Ecosystem.HACKAGE,
    'hex': Ecosystem.HEX,
    'maven': Ecosystem.MAVEN,
    'npm': Ecosystem.NPM,
    'nuget': Ecosystem.NUGET,
    'pub': Ecosystem.PUB,
    'pypi': Ecosystem.PYPI,
    'swift': Ecosystem.SWIFT_URL,
}

# For OS package types the namespace names the distribution
_DISTRO_ECOSYSTEMS: dict[str, Ecosystem] = {
    'almalinux': Ecosystem.ALMALINUX,
    'alpine': Ecosystem.ALPINE,
    'chainguard': Ecosystem.CHAINGUARD,
    'debian': Ecosystem.DEBIAN,
    'mageia': Ecosystem.MAGEIA,
    'openeuler': Ecosystem.OPENEULER,
    'opensuse': Ecosystem.OPENSUSE,
    'photon': Ecosystem.PHOTON_OS,
    'redhat': Ecosystem.RED_HAT,
    'rocky-linux': Ecosystem.ROCKY_LINUX,
    'suse': Ecosystem.SUSE,
    'ubuntu': Ecosystem.UBUNTU,
    'wolfi': Ecosystem.WOLFI,
}

_OS_PURL_TYPES = frozenset({'deb', 'apk', 'rpm'})


@dataclass(frozen=True)
class OverrideIdentity:
    """Package identity recovered from a package URL."""
    name: str
    version: str
    ecosystem: str


def purl_to_identity(purl: str) -> OverrideIdentity:
    """
    Convert a package URL into a name / version / ecosystem triple.

    Raises:
        ValueError if the purl is malformed or its type has no known ecosystem
    """
    parsed = PackageURL.from_string(purl)
    namespace = parsed.namespace or ''

    if parsed.type in _OS_PURL_TYPES:
        ecosystem = _DISTRO_ECOSYSTEMS.get(namespace.lower())
        if ecosystem is None:
            raise ValueError(f"Unknown distribution {namespace!r} in purl: {purl}")
        name = parsed.name
    else:
        ecosystem = _PURL_ECOSYSTEMS.get(parsed.type)
        if ecosystem is None:
            raise ValueError(f"Unsupported purl type {parsed.type!r}: {purl}")
        name = parsed.name
        if namespace:
            sep = ':' if parsed.type == 'maven' else '/'
            name = f"{namespace}{sep}{parsed.name}"

    return OverrideIdentity(
        name=name,
        version=parsed.version or '',
        ecosystem=ecosystem.value,
    )
