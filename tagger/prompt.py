"""
prompt.py

Responsibility: follow-up actions on a freshly created tag.

After tagging, the user picks one of show / delete / push / quit. Each action is
a single git command with no rollback. Unrecognised input prints "Huh?!" and
asks again until a valid choice (or end of input) arrives.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum
from typing import TextIO

import structlog

from tagger.git_client import TagRepository
from tagger.renderer import render_menu

logger = structlog.get_logger(__name__)


class MenuChoice(Enum):
    SHOW = "show"
    DELETE = "delete"
    PUSH = "push"
    QUIT = "quit"


# Exact, case-sensitive matches only.
CHOICES: dict[str, MenuChoice] = {
    "s": MenuChoice.SHOW,
    "show": MenuChoice.SHOW,
    "d": MenuChoice.DELETE,
    "delete": MenuChoice.DELETE,
    "p": MenuChoice.PUSH,
    "push": MenuChoice.PUSH,
    "q": MenuChoice.QUIT,
    "quit": MenuChoice.QUIT,
}


def _read_choice(read_line: Callable[[], str], output: TextIO) -> MenuChoice:
    while True:
        try:
            line = read_line()
        except EOFError:
            return MenuChoice.QUIT
        choice = CHOICES.get(line.rstrip("\r\n"))
        if choice is not None:
            return choice
        print("\nHuh?!", file=output)


def handle_user_input(
    repo: TagRepository,
    tag_name: str,
    *,
    remote: str = "origin",
    read_line: Callable[[], str] = input,
    output: TextIO | None = None,
) -> MenuChoice:
    """
    Wait for a valid choice and perform it. Returns the choice that was made.
    """
    out = output or sys.stdout
    choice = _read_choice(read_line, out)
    logger.info("menu.choice", choice=choice.value, tag=tag_name)

    if choice is MenuChoice.SHOW:
        print(repo.show_tag(tag_name), file=out)
    elif choice is MenuChoice.DELETE:
        print(repo.delete_tag(tag_name), file=out)
    elif choice is MenuChoice.PUSH:
        print(repo.push(remote), file=out)
    return choice


def present_result(
    repo: TagRepository,
    tag_name: str,
    *,
    remote: str = "origin",
    read_line: Callable[[], str] = input,
    output: TextIO | None = None,
) -> MenuChoice:
    out = output or sys.stdout
    print(render_menu(tag_name, remote), file=out)
    return handle_user_input(repo, tag_name, remote=remote, read_line=read_line, output=out)
