from pkgident.models import extractor
from pkgident.models.source_type import SourceType

OS_EXTRACTORS = frozenset({
    extractor.DPKG,
    extractor.APK,
    extractor.RPM,
})

SBOM_EXTRACTORS = frozenset({
    extractor.SPDX,
    extractor.CDX,
})

GIT_EXTRACTORS = frozenset({
    extractor.GITREPO,
})

ARTIFACT_EXTRACTORS = frozenset({
    extractor.NODE_MODULES,
    extractor.GO_BINARY,
    extractor.JAVA_ARCHIVE,
    extractor.WHEEL_EGG,
})


def build_lookup(groups: dict[SourceType, frozenset[str]]) -> dict[str, SourceType]:
    """
    Flatten per-category extractor sets into one name -> category table.

    Raises:
        ValueError if an extractor name appears in more than one set
    """
    lookup: dict[str, SourceType] = {}
    for source_type, names in groups.items():
        for name in names:
            if name in lookup:
                raise ValueError(
                    f"Extractor {name!r} classified as both "
                    f"{lookup[name]} and {source_type}",
                )
            lookup[name] = source_type
    return lookup


_SOURCE_TYPES = build_lookup({
    SourceType.OS_PACKAGE: OS_EXTRACTORS,
    SourceType.SBOM: SBOM_EXTRACTORS,
    SourceType.GIT: GIT_EXTRACTORS,
    SourceType.ARTIFACT: ARTIFACT_EXTRACTORS,
})


def classify_extractor(name: str | None) -> SourceType:
    """Map an extractor name to the kind of source it reads."""
    if name is None:
        return SourceType.UNKNOWN
    # Anything unlisted is assumed to be a manifest/lockfile in the project
    return _SOURCE_TYPES.get(name, SourceType.PROJECT_PACKAGE)
