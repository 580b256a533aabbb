"""
Unit tests for ConfigFileVersionComparator
"""

import pytest

from fx_config_file.domain.config_file_version import OpaqueVersion, SemverVersion
from fx_config_file.versions.concretes.config_file_version.config_file_version_comparator import ConfigFileVersionComparator


@pytest.fixture
def comparator():
    return ConfigFileVersionComparator()


def test_parse_semver_with_and_without_caret(comparator):
    assert comparator.parse_version("^4.12.3") == SemverVersion(4, 12, 3)
    assert comparator.parse_version("4.12.3") == SemverVersion(4, 12, 3)


def test_parse_opaque(comparator):
    assert comparator.parse_version("nightly") == OpaqueVersion("nightly")
    assert comparator.parse_version(None) == OpaqueVersion(None)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("^1.2.3", "^1.2.3", 0),
        ("^1.10.0", "^1.9.9", 1),
        ("^1.2.3", "^2.0.0", -1),
        ("^0.0.1", "nightly", 1),
        ("nightly", "^0.0.1", -1),
        ("alpha", "beta", -1),
        ("beta", "beta", 0),
    ],
)
def test_compare_versions(comparator, left, right, expected):
    assert comparator.compare_versions(comparator.parse_version(left), comparator.parse_version(right)) == expected


def test_missing_version_sorts_first(comparator):
    missing = comparator.parse_version(None)
    assert comparator.compare_versions(missing, missing) == 0
    assert comparator.compare_versions(missing, comparator.parse_version("x")) == -1
    assert comparator.compare_versions(comparator.parse_version("x"), missing) == 1


@pytest.mark.parametrize("value", ["1.2.3junk", "^1.2", "٤.1.2", "1.2.3.4"])
def test_partial_or_non_ascii_semver_is_opaque(comparator, value):
    assert comparator.parse_version(value) == OpaqueVersion(value)
