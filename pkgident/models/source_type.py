from enum import Enum


class SourceType(str, Enum):
    """Which kind of extractor a package record came from."""
    OS_PACKAGE = 'os'
    SBOM = 'sbom'
    GIT = 'git'
    ARTIFACT = 'artifact'
    PROJECT_PACKAGE = 'project'
    UNKNOWN = 'unknown'

    def __str__(self) -> str:
        return self.value.lower()

    def __repr__(self) -> str:
        return self.value.lower()
