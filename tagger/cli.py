"""
cli.py

Responsibility: CLI entrypoint for the release tagger.

High-level flow (release commands `major` / `minor` / `patch` / `snapshot`):
1) Load config -> `TaggerConfig` (+ CLI overrides)
2) Resolve the latest release version from git tags
3) Compute the next version and create the annotated tag locally
4) (Interactive) offer show / delete / push / quit on the new tag

Read-only commands:
- `current`: print the latest version name (e.g. 1.4.2)
- `code`: print the latest build number (e.g. 7)

This module should orchestrate behavior but keep concerns isolated:
- Version logic: `version.py`
- Git commands: `git_client.py`
- Tag message / menu text: `renderer.py`
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog

from tagger.config import ConfigError, TaggerConfig, load_config
from tagger.git_client import GitClient, GitCommandError
from tagger.log import configure_logging
from tagger.prompt import present_result
from tagger.release import ReleaseTagger
from tagger.renderer import RenderError
from tagger.version import BumpKind, MalformedVersionTag

logger = structlog.get_logger(__name__)


class CLIError(RuntimeError):
    pass


_ERRORS = (CLIError, ConfigError, GitCommandError, MalformedVersionTag, RenderError)


def _load_config(args: argparse.Namespace) -> TaggerConfig:
    repo_dir = Path(args.repo)
    if not repo_dir.is_dir():
        raise CLIError(f"Repository directory not found: {repo_dir}")
    config = load_config(args.config, repo_dir=repo_dir)
    return config.with_overrides(
        remote=args.remote,
        fetch=False if args.no_fetch else None,
    )


def _tagger(args: argparse.Namespace) -> tuple[ReleaseTagger, GitClient]:
    config = _load_config(args)
    git = GitClient(args.repo)
    return ReleaseTagger(git, config), git


def release_cmd(args: argparse.Namespace) -> int:
    tagger, git = _tagger(args)
    result = tagger.prepare(BumpKind.parse(args.command))

    print(f"Created tag {result.tag_name} ({result.since or 'no previous tag'} -> {result.tag_name})")
    if args.interactive:
        present_result(git, result.tag_name, remote=tagger.config.remote)
    return 0


def current_cmd(args: argparse.Namespace) -> int:
    tagger, _git = _tagger(args)
    print(tagger.resolve_latest_version().name)
    return 0


def code_cmd(args: argparse.Namespace) -> int:
    tagger, _git = _tagger(args)
    print(tagger.resolve_latest_version().build)
    return 0


def _add_common_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--repo", default=".", help="Git repository to operate on (default: current directory)")
    p.add_argument("--config", default=None, help="Config file (default: <repo>/.release-tagger.yml if present)")
    p.add_argument("--remote", default=None, help="Remote to fetch tags from and push to (overrides config)")
    p.add_argument("--no-fetch", action="store_true", help="Do not fetch tags from the remote first")
    p.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    p.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="release-tagger", description="Create the next annotated release tag from git history")
    sub = p.add_subparsers(dest="command", required=True)

    for kind in BumpKind:
        r = sub.add_parser(kind.value, help=f"Create the next {kind.value} release tag")
        _add_common_options(r)
        r.add_argument(
            "--no-interactive",
            dest="interactive",
            action="store_false",
            default=True,
            help="Do not offer show / delete / push after tagging",
        )
        r.set_defaults(func=release_cmd)

    c = sub.add_parser("current", help="Print the current version name")
    _add_common_options(c)
    c.set_defaults(func=current_cmd)

    v = sub.add_parser("code", help="Print the current build number")
    _add_common_options(v)
    v.set_defaults(func=code_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=bool(args.log_json))
    try:
        return int(args.func(args))
    except _ERRORS as e:
        logger.error("release.failed", error=str(e), error_type=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
