import re
from typing import Optional

from fx_config_file.domain.config_file_version import ConfigFileVersion, OpaqueVersion, SemverVersion
from fx_config_file.versions.interfaces.version_comparator_interface import IVersionComparator


class ConfigFileVersionComparator(IVersionComparator):
    """
    Understands ``^MAJOR.MINOR.BUILD`` versions (the caret is optional).

    Anything else is kept as an opaque version. Ordering:
    opaque(None) < opaque(str) < semver, opaque strings compare lexicographically,
    semver versions compare numerically component by component.
    """

    SEMVER_REGEX: re.Pattern = re.compile(r"^\^?([0-9]+)\.([0-9]+)\.([0-9]+)$")

    def parse_version(self, version_value: Optional[str]) -> ConfigFileVersion:
        if version_value is None:
            return OpaqueVersion(None)
        match = self.SEMVER_REGEX.match(version_value.strip())
        if match is None:
            return OpaqueVersion(version_value)
        major, minor, build = (int(group) for group in match.groups())
        return SemverVersion(major=major, minor=minor, build=build)

    def compare_versions(self, left: ConfigFileVersion, right: ConfigFileVersion) -> int:
        if isinstance(left, SemverVersion) and isinstance(right, SemverVersion):
            left_key = (left.major, left.minor, left.build)
            right_key = (right.major, right.minor, right.build)
            return (left_key > right_key) - (left_key < right_key)
        if isinstance(left, SemverVersion):
            return 1
        if isinstance(right, SemverVersion):
            return -1

        # both opaque
        if left.raw is None and right.raw is None:
            return 0
        if left.raw is None:
            return -1
        if right.raw is None:
            return 1
        return (left.raw > right.raw) - (left.raw < right.raw)
