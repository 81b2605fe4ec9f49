import pytest

from n8lang.semver import SemVer, validate_semver


def test_parse_full_version():
    version = SemVer.parse("1.2.3-alpha.1+build.5")
    assert (version.major, version.minor, version.patch) == (1, 2, 3)
    assert version.pre_release == "alpha.1"
    assert version.build_metadata == "build.5"


def test_parse_plain_version_has_no_tags():
    version = SemVer.parse("10.20.30")
    assert (version.major, version.minor, version.patch) == (10, 20, 30)
    assert version.pre_release is None
    assert version.build_metadata is None


@pytest.mark.parametrize(
    "text",
    ["1.0.0", "1.0.0-rc.1", "1.0.0+sha.abc", "2.3.4-beta-2+exp.sha-5", "1.0.0"],
)
def test_string_round_trip(text):
    assert str(SemVer.parse(text)) == text


def test_default_version_string():
    assert str(SemVer(1, 0, 0)) == "1.0.0"


def test_fields_can_be_changed():
    version = SemVer.parse("1.2.3")
    version.patch = 4
    version.pre_release = "rc"
    assert str(version) == "1.2.4-rc"


@pytest.mark.parametrize(
    "text",
    ["1.2", "1.2.3.4", "v1.2.3", "1.2.3-", "1.2.3+", "1.2.3\n", "1.2.3-a b", "\u0661.2.3", ""],
)
def test_invalid_versions(text):
    assert validate_semver(text) is False
    assert SemVer.parse(text) is None


@pytest.mark.parametrize("text", ["0.0.0", "1.2.3-x.y", "1.2.3+meta", "1.2.3-a+b"])
def test_valid_versions(text):
    assert validate_semver(text) is True


def test_oversized_component_raises():
    with pytest.raises(OverflowError):
        SemVer.parse("99999999999.0.0")


def test_parsed_versions_compare_equal():
    assert SemVer.parse("1.2.3-a+b") == SemVer(1, 2, 3, "a", "b")