"""
renderer.py

Responsibility: Render the text a release produces.

Rules:
- The tag message is a Jinja2 template: subject line, blank line, commit bullets.
- The follow-up menu shown after tagging is rendered the same way.
- Rendering is strict: an unknown template variable is an error, not an empty string.

This module intentionally does NOT know about git or CLI parsing.
"""

from __future__ import annotations

from collections.abc import Sequence

from jinja2 import Environment, StrictUndefined

from tagger.version import Version


class RenderError(RuntimeError):
    pass


DEFAULT_MESSAGE_TEMPLATE = "{{ subject }}\n\n{{ body }}"

MENU_TEMPLATE = """
You can now:
  (s)how   - git show {{ tag }}
  (d)elete - git tag -d {{ tag }}
  (p)ush   - git push {{ remote }} && git push {{ remote }} --tags
  (q)uit   - quit

To edit a tag you'll have to manually do:
      git tag -a -f {{ tag }}
"""

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def _render(source: str, **context: object) -> str:
    try:
        return _env.from_string(source).render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template: {e}") from e


def format_commit_list(commits: Sequence[str]) -> str:
    return "\n".join(f"* {subject}" for subject in commits)


def render_tag_message(
    version: Version,
    commits: Sequence[str],
    *,
    template: str | None = None,
) -> str:
    """
    Render the annotated tag message for `version`.

    Template variables: subject, body, commits, name, major, minor, patch, build.
    Trailing whitespace is stripped so a release with no commits is just the subject.
    """
    out = _render(
        template or DEFAULT_MESSAGE_TEMPLATE,
        subject=version.subject,
        body=format_commit_list(commits),
        commits=list(commits),
        name=version.name,
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        build=version.build,
    )
    return out.rstrip()


def render_menu(tag_name: str, remote: str = "origin") -> str:
    return _render(MENU_TEMPLATE, tag=tag_name, remote=remote)
