import pytest

from tagger.version import BumpKind, MalformedVersionTag, Version, next_version, parse_version_subject


@pytest.mark.parametrize(
    ("subject", "expected"),
    [
        ("Version 1.2.3", (1, 2, 3, 1)),
        ("Version 0.0.9", (0, 0, 9, 1)),
        ("Version 1.2.3 (7)", (1, 2, 3, 7)),
        ("Version 10.20.30 (123)", (10, 20, 30, 123)),
        ("Version 2.0.0 build42", (2, 0, 0, 42)),
    ],
)
def test_parse_version_subject(subject: str, expected: tuple[int, int, int, int]) -> None:
    assert parse_version_subject(subject).components() == expected


@pytest.mark.parametrize("subject", [None, "", "   "])
def test_missing_subject_is_zero_version(subject: str | None) -> None:
    assert parse_version_subject(subject) == Version.zero()
    assert Version.zero().components() == (0, 0, 0, 0)


@pytest.mark.parametrize(
    "subject",
    [
        "Version 1.2",
        "Release 1.2.3",
        "Version 1.2.3 (7) extra",
        "Version 1.2.3 (abc)",
    ],
)
def test_malformed_subject(subject: str) -> None:
    with pytest.raises(MalformedVersionTag):
        parse_version_subject(subject)


def test_minor_bump_example() -> None:
    new = next_version(Version(1, 4, 2, 7), BumpKind.MINOR)
    assert new == Version(1, 5, 0, 8)
    assert new.name == "1.5.0"
    assert new.subject == "Version 1.5.0 (8)"


def test_major_bump_zeroes_minor_and_patch() -> None:
    assert next_version(Version(1, 4, 2, 7), BumpKind.MAJOR) == Version(2, 0, 0, 8)


def test_patch_bump_changes_only_patch() -> None:
    new = next_version(Version(1, 4, 2, 7), BumpKind.PATCH)
    assert new == Version(1, 4, 3, 8)
    assert new.name == "1.4.3"


def test_snapshot_bump_example() -> None:
    new = next_version(Version(2, 0, 0, 3), BumpKind.SNAPSHOT)
    assert new.components() == (2, 0, 0, 4)
    assert new.snapshot
    assert new.name == "2.0.0-4-SNAPSHOT"
    assert new.subject == "Version 2.0.0 (4)"


def test_release_bump_after_snapshot_drops_suffix() -> None:
    snapshot = Version(2, 0, 0, 4, snapshot=True)
    assert next_version(snapshot, BumpKind.PATCH).name == "2.0.1"


def test_first_patch_release() -> None:
    new = next_version(Version.zero(), BumpKind.PATCH)
    assert new.components() == (0, 0, 1, 1)
    assert new.name == "0.0.1"


def test_next_version_is_deterministic() -> None:
    current = Version(3, 1, 4, 15)
    for kind in BumpKind:
        assert next_version(current, kind) == next_version(current, kind)


def test_custom_snapshot_suffix() -> None:
    assert Version(1, 0, 0, 2, snapshot=True, snapshot_suffix="DEV").name == "1.0.0-2-DEV"


def test_negative_component_rejected() -> None:
    with pytest.raises(ValueError):
        Version(1, -1, 0, 0)


def test_bump_kind_parse() -> None:
    assert BumpKind.parse("Minor") is BumpKind.MINOR
    with pytest.raises(ValueError):
        BumpKind.parse("huge")
