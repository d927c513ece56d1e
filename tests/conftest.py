from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from tagger.git_client import GitCommandError, TagInfo
from tagger.log import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    configure_logging("WARNING")


@dataclass
class FakeRepository:
    """In-memory TagRepository that records every call."""

    tag: TagInfo | None = None
    commits: list[str] = field(default_factory=list)
    existing_tags: set[str] = field(default_factory=set)
    calls: list[tuple[str, ...]] = field(default_factory=list)
    created: dict[str, str] = field(default_factory=dict)

    def fetch_tags(self, remote: str) -> None:
        self.calls.append(("fetch_tags", remote))

    def latest_tag(self, pattern: str) -> TagInfo | None:
        self.calls.append(("latest_tag", pattern))
        return self.tag

    def commit_subjects(self, since: str | None) -> list[str]:
        self.calls.append(("commit_subjects", since or ""))
        return list(self.commits)

    def create_tag(self, name: str, message: str) -> None:
        self.calls.append(("create_tag", name))
        if name in self.existing_tags:
            raise GitCommandError(f"Command failed: git tag -a {name}\n\nfatal: tag '{name}' already exists")
        self.created[name] = message

    def delete_tag(self, name: str) -> str:
        self.calls.append(("delete_tag", name))
        return f"Deleted tag '{name}'"

    def show_tag(self, name: str) -> str:
        self.calls.append(("show_tag", name))
        return f"tag {name}"

    def push(self, remote: str) -> str:
        self.calls.append(("push", remote))
        return f"pushed to {remote}"

    def mutating_calls(self) -> list[tuple[str, ...]]:
        return [c for c in self.calls if c[0] in {"create_tag", "delete_tag", "show_tag", "push"}]


@pytest.fixture
def fake_repo() -> FakeRepository:
    return FakeRepository()
