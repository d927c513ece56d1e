"""
git_client.py

Responsibility: Isolate all direct git interaction.

This module must be the only place that:
- Builds git command lines
- Runs git as a subprocess
- Interprets git output / failures

Everything else (version parsing, tag messages, CLI behavior) should go through
the `TagRepository` interface so it can be exercised without a real repository.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)


class GitCommandError(RuntimeError):
    pass


@dataclass(frozen=True)
class TagInfo:
    name: str
    subject: str


class TagRepository(Protocol):
    def fetch_tags(self, remote: str) -> None: ...

    def latest_tag(self, pattern: str) -> TagInfo | None: ...

    def commit_subjects(self, since: str | None) -> list[str]: ...

    def create_tag(self, name: str, message: str) -> None: ...

    def delete_tag(self, name: str) -> str: ...

    def show_tag(self, name: str) -> str: ...

    def push(self, remote: str) -> str: ...


class GitClient:
    def __init__(
        self,
        repo_dir: str | Path = ".",
        *,
        executable: str = "git",
        env: dict[str, str] | None = None,
    ) -> None:
        self._repo_dir = Path(repo_dir)
        self._executable = executable
        self._env = env

    @property
    def repo_dir(self) -> Path:
        return self._repo_dir

    def _run(self, *args: str) -> str:
        """
        Run a git command in the repository, returning stdout. Raises GitCommandError on failure.
        """
        cmd = [self._executable, *args]
        logger.debug("git.run", cmd=cmd, cwd=str(self._repo_dir))
        try:
            r = subprocess.run(
                cmd,
                cwd=str(self._repo_dir),
                env=self._env,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError(f"Command not found: {self._executable}") from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(f"Command failed: {' '.join(cmd)}\n\n{(e.stderr or '').strip()}") from e
        return r.stdout

    def fetch_tags(self, remote: str) -> None:
        self._run("fetch", remote, "refs/tags/*:refs/tags/*")
        logger.info("tags.fetched", remote=remote)

    def latest_tag(self, pattern: str) -> TagInfo | None:
        """
        Return the most recently created tag matching `pattern` (a for-each-ref
        glob relative to refs/tags/), or None when no tag matches.
        """
        out = self._run(
            "for-each-ref",
            "--count=1",
            "--sort=-taggerdate",
            "--format=%(refname:strip=2) %(subject)",
            f"refs/tags/{pattern}",
        ).strip()
        if not out:
            return None
        # Tag names cannot contain spaces; the subject is everything after the first one.
        name, _sep, subject = out.partition(" ")
        return TagInfo(name=name, subject=subject.strip())

    def commit_subjects(self, since: str | None) -> list[str]:
        rev = f"{since}..HEAD" if since else "HEAD"
        out = self._run("log", "--pretty=format:%s", rev)
        return [line for line in out.splitlines() if line.strip()]

    def create_tag(self, name: str, message: str) -> None:
        self._run("tag", "-a", name, "-m", message)

    def delete_tag(self, name: str) -> str:
        return self._run("tag", "-d", name)

    def show_tag(self, name: str) -> str:
        return self._run("show", name)

    def push(self, remote: str) -> str:
        """
        Push the current branch, then all tags, to `remote`.
        """
        branch_out = self._run("push", remote)
        tags_out = self._run("push", remote, "--tags")
        return branch_out + tags_out
