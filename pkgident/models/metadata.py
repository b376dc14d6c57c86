"""Extractor metadata payloads recognised by the identity layer."""
from typing import Annotated
from typing import Literal
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class _Metadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)


class JavaArchiveMetadata(_Metadata):
    """Maven coordinates read from a JAR/WAR/EAR manifest or pom.properties."""
    kind: Literal['java-archive'] = 'java-archive'
    group_id: str = Field(alias='groupId', default='')
    artifact_id: str = Field(alias='artifactId', default='')


class DpkgMetadata(_Metadata):
    """An entry of a Debian-family dpkg status database."""
    kind: Literal['dpkg'] = 'dpkg'
    package_name: str = ''
    source_name: str = ''
    source_version: str = ''
    os_id: str = ''
    os_version_id: str = ''


class ApkMetadata(_Metadata):
    """An entry of an Alpine-family apk installed database."""
    kind: Literal['apk'] = 'apk'
    package_name: str = ''
    origin_name: str = ''
    os_id: str = ''
    os_version_id: str = ''


class RpmMetadata(_Metadata):
    """An entry of an RPM-family package database."""
    kind: Literal['rpm'] = 'rpm'
    package_name: str = ''
    source_rpm: str = ''
    epoch: int = 0
    os_id: str = ''
    os_version_id: str = ''


class LockfileMetadata(_Metadata):
    """Metadata of project lockfile entries, carrying dependency groups."""
    kind: Literal['lockfile'] = 'lockfile'
    dep_group_vals: list[str] = Field(default_factory=list)

    def dep_groups(self) -> list[str]:
        return list(self.dep_group_vals)


class SbomMetadata(_Metadata):
    """Identifiers copied out of an SPDX or CycloneDX component."""
    kind: Literal['sbom'] = 'sbom'
    purl: str | None = None
    cpes: list[str] = Field(default_factory=list)


class UnknownMetadata(_Metadata):
    kind: Literal['unknown'] = 'unknown'


Metadata = Annotated[
    Union[
        JavaArchiveMetadata,
        DpkgMetadata,
        ApkMetadata,
        RpmMetadata,
        LockfileMetadata,
        SbomMetadata,
        UnknownMetadata,
    ],
    Field(discriminator='kind'),
]

OS_METADATA = (ApkMetadata, DpkgMetadata, RpmMetadata)

METADATA_KINDS = frozenset({
    'java-archive', 'dpkg', 'apk', 'rpm', 'lockfile', 'sbom', 'unknown',
})
