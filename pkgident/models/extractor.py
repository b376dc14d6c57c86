from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ConfigDict

from pkgident.models.metadata import SbomMetadata

if TYPE_CHECKING:
    from pkgident.models.record import RawRecord

# Extractor names, as reported by the extractors themselves
DPKG = 'os/dpkg'
APK = 'os/apk'
RPM = 'os/rpm'
SPDX = 'sbom/spdx'
CDX = 'sbom/cdx'
GITREPO = 'vcs/gitrepo'
NODE_MODULES = 'javascript/nodemodules'
GO_BINARY = 'go/binary'
JAVA_ARCHIVE = 'java/archive'
WHEEL_EGG = 'python/wheelegg'


class Extractor(BaseModel):
    """Reference to the extractor that produced a record."""
    name: str

    model_config = ConfigDict(frozen=True)

    def to_purl(self, record: 'RawRecord') -> str | None:
        """Render the record as a package URL, if this extractor knows how."""
        return None


class SbomExtractor(Extractor):
    """SPDX / CycloneDX extractors hand back the purl written in the document."""

    def to_purl(self, record: 'RawRecord') -> str | None:
        if isinstance(record.metadata, SbomMetadata):
            return record.metadata.purl or None
        return None


_REGISTRY: dict[str, Extractor] = {
    name: Extractor(name=name)
    for name in (
        DPKG, APK, RPM, GITREPO,
        NODE_MODULES, GO_BINARY, JAVA_ARCHIVE, WHEEL_EGG,
    )
}
_REGISTRY[SPDX] = SbomExtractor(name=SPDX)
_REGISTRY[CDX] = SbomExtractor(name=CDX)


def get_extractor(name: str) -> Extractor:
    """Look up a built-in extractor by name; unknown names get a bare reference."""
    extractor = _REGISTRY.get(name)
    if extractor is None:
        return Extractor(name=name)
    return extractor
