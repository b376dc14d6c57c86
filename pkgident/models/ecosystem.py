from dataclasses import dataclass
from dataclasses import field
from enum import Enum


class Ecosystem(str, Enum):
    """Ecosystems known to the OSV schema."""
    ALMALINUX = 'AlmaLinux'
    ALPINE = 'Alpine'
    ANDROID = 'Android'
    BITNAMI = 'Bitnami'
    BIOCONDUCTOR = 'Bioconductor'
    CHAINGUARD = 'Chainguard'
    CRAN = 'CRAN'
    CRATES_IO = 'crates.io'
    DEBIAN = 'Debian'
    GHC = 'GHC'
    GIT = 'GIT'
    GITHUB_ACTIONS = 'GitHub Actions'
    GO = 'Go'
    HACKAGE = 'Hackage'
    HEX = 'Hex'
    LINUX = 'Linux'
    MAGEIA = 'Mageia'
    MAVEN = 'Maven'
    MINIMOS = 'MinimOS'
    NPM = 'npm'
    NUGET = 'NuGet'
    OPENEULER = 'openEuler'
    OPENSUSE = 'openSUSE'
    OSS_FUZZ = 'OSS-Fuzz'
    PACKAGIST = 'Packagist'
    PHOTON_OS = 'Photon OS'
    PUB = 'Pub'
    PYPI = 'PyPI'
    RED_HAT = 'Red Hat'
    ROCKY_LINUX = 'Rocky Linux'
    RUBYGEMS = 'RubyGems'
    SUSE = 'SUSE'
    SWIFT_URL = 'SwiftURL'
    UBUNTU = 'Ubuntu'
    WOLFI = 'Wolfi'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


_KNOWN_ECOSYSTEMS = {e.value: e for e in Ecosystem}


@dataclass(frozen=True)
class ParsedEcosystem:
    """
    An ecosystem string split into its base ecosystem and optional suffix.

    e.g. "Debian:12" parses to (Ecosystem.DEBIAN, "12"). An unrecognised
    base is kept verbatim as a plain string so it still round-trips.
    """
    ecosystem: Ecosystem | str = ''
    suffix: str = ''

    @property
    def is_empty(self) -> bool:
        return self.ecosystem == ''

    @property
    def is_known(self) -> bool:
        return isinstance(self.ecosystem, Ecosystem)

    def __str__(self) -> str:
        base = str(self.ecosystem)
        if self.suffix:
            return f"{base}:{self.suffix}"
        return base


@dataclass(frozen=True)
class EcosystemParseResult:
    parsed: ParsedEcosystem
    warnings: list[str] = field(default_factory=list)


def parse_ecosystem(value: str) -> EcosystemParseResult:
    """
    Parse an ecosystem string such as "PyPI", "Alpine:v3.18" or "Ubuntu:22.04:LTS".

    Never raises. Unknown ecosystems come back as a best-effort value holding
    the whole input, together with a warning for the caller to surface.
    """
    if not value:
        return EcosystemParseResult(parsed=ParsedEcosystem())

    base, _, suffix = value.partition(':')
    known = _KNOWN_ECOSYSTEMS.get(base)
    if known is None:
        return EcosystemParseResult(
            parsed=ParsedEcosystem(ecosystem=value),
            warnings=[f"unknown ecosystem: {value}"],
        )

    return EcosystemParseResult(parsed=ParsedEcosystem(ecosystem=known, suffix=suffix))
