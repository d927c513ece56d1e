"""
release.py

Responsibility: the release workflow.

    resolve latest version -> compute next version -> create annotated tag

The workflow is linear and has no retry or rollback: creating the tag is the
only mutating step and it comes last, so any earlier failure leaves the
repository untouched. Pushing is never done here; see `prompt.py`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

import structlog

from tagger.config import TaggerConfig
from tagger.git_client import TagInfo, TagRepository
from tagger.renderer import render_tag_message
from tagger.version import BumpKind, Version, next_version, parse_version_subject

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TagCreationResult:
    tag_name: str
    message: str
    previous: Version
    version: Version
    since: str | None
    commits: tuple[str, ...]


class ReleaseTagger:
    def __init__(
        self,
        repo: TagRepository,
        config: TaggerConfig | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._repo = repo
        self._config = config or TaggerConfig()
        self._environ = environ
        self._fetched = False

    @property
    def config(self) -> TaggerConfig:
        return self._config

    def latest_tag(self) -> TagInfo | None:
        """
        Return the most recent release tag, fetching remote tags first (once) when enabled.
        """
        if self._config.fetch and not self._fetched:
            self._repo.fetch_tags(self._config.remote)
            self._fetched = True
        return self._repo.latest_tag(self._config.tag_pattern)

    def resolve_latest_version(self) -> Version:
        return self._version_from(self.latest_tag())

    def _version_from(self, tag: TagInfo | None) -> Version:
        if tag is None:
            version = Version.zero()
        else:
            version = parse_version_subject(tag.subject)
        version = replace(version, snapshot_suffix=self._config.snapshot_suffix)
        logger.info(
            "version.resolved",
            tag=tag.name if tag else None,
            version=version.semver,
            build=version.build,
        )
        return version

    def next_version(self, current: Version, kind: BumpKind) -> Version:
        version = next_version(current, kind)
        override = self._config.build_number_override(self._environ)
        if override is not None:
            version = replace(version, build=override)
        logger.info("version.next", kind=kind.value, version=version.name, build=version.build)
        return version

    def create_tag(self, previous: Version, version: Version, *, since: str | None) -> TagCreationResult:
        """
        Create the annotated tag for `version`, summarising commits after `since`
        (the previous tag name, or None for the whole history).
        """
        commits = tuple(self._repo.commit_subjects(since))
        message = render_tag_message(version, commits, template=self._config.message_template)
        tag_name = self._config.tag_name(version.name)

        self._repo.create_tag(tag_name, message)
        logger.info("tag.created", tag=tag_name, since=since, commits=len(commits))

        return TagCreationResult(
            tag_name=tag_name,
            message=message,
            previous=previous,
            version=version,
            since=since,
            commits=commits,
        )

    def prepare(self, kind: BumpKind) -> TagCreationResult:
        tag = self.latest_tag()
        current = self._version_from(tag)
        new = self.next_version(current, kind)
        return self.create_tag(current, new, since=tag.name if tag else None)
