import re
from dataclasses import dataclass
from dataclasses import field

_COMPONENTS_RE = re.compile(r'\d+(?:\.\d+)*')


@dataclass(frozen=True)
class SemverLikeVersion:
    """A loosely semver-shaped version: numeric components plus a build tail."""
    original: str
    leading_v: bool = False
    components: list[int] = field(default_factory=list)
    build: str = ''

    def fetch(self, index: int) -> int:
        """Component at index, or 0 if the version is shorter than that."""
        if index < len(self.components):
            return self.components[index]
        return 0


def parse_semver_like(line: str, max_components: int = -1) -> SemverLikeVersion:
    """
    Split a version string into its leading dotted numeric components and
    whatever follows them.

    "1.19" -> [1, 19]; "v1.2.3-rc1" -> [1, 2, 3] with build "-rc1".
    Components past max_components are folded back into the build string.
    """
    rest = line
    leading_v = rest.startswith('v')
    if leading_v:
        rest = rest[1:]

    match = _COMPONENTS_RE.match(rest)
    if not match:
        return SemverLikeVersion(original=line, leading_v=leading_v, build=rest)

    components = [int(c) for c in match.group(0).split('.')]
    build = rest[match.end():]

    if max_components != -1 and len(components) > max_components:
        extra = components[max_components:]
        components = components[:max_components]
        build = ''.join(f".{c}" for c in extra) + build

    return SemverLikeVersion(
        original=line,
        leading_v=leading_v,
        components=components,
        build=build,
    )
