"""
tagger package

This package implements a release tagger: it derives a semantic version from
git tag history and creates the next annotated release tag.

Key responsibilities are split across modules:
- `version.py`: pure version model, tag subject parsing and bump computation
- `git_client.py`: isolated git subprocess interactions (fetch / log / tag / push)
- `config.py`: optional YAML configuration file into a typed config
- `renderer.py`: Jinja2 rendering of the tag message and the follow-up menu
- `release.py`: the release workflow (resolve -> compute -> create tag)
- `prompt.py`: interactive follow-up actions on the new tag
- `cli.py`: CLI entrypoint and orchestration
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
