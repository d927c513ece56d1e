import pytest

from tagger.renderer import RenderError, format_commit_list, render_menu, render_tag_message
from tagger.version import Version


def test_commit_bullets() -> None:
    assert format_commit_list(["One", "Two"]) == "* One\n* Two"
    assert format_commit_list([]) == ""


def test_default_tag_message() -> None:
    message = render_tag_message(Version(1, 5, 0, 8), ["Fix crash", "Add retry"])
    assert message == "Version 1.5.0 (8)\n\n* Fix crash\n* Add retry"


def test_tag_message_without_commits_is_subject_only() -> None:
    assert render_tag_message(Version(0, 0, 1, 1), []) == "Version 0.0.1 (1)"


def test_unknown_template_variable_is_an_error() -> None:
    with pytest.raises(RenderError):
        render_tag_message(Version(1, 0, 0, 1), [], template="{{ nope }}")


def test_menu_lists_actions() -> None:
    menu = render_menu("v1.5.0")
    assert menu.startswith("\nYou can now:\n")
    assert "  (p)ush   - git push origin && git push origin --tags\n" in menu
    assert "  (q)uit   - quit\n" in menu
    assert "      git tag -a -f v1.5.0\n" in menu


def test_runtime_error_in_custom_template_is_a_render_error() -> None:
    with pytest.raises(RenderError, match="division"):
        render_tag_message(Version(1, 0, 0, 1), [], template="{{ major // 0 }}")


def test_menu_push_line_names_remote() -> None:
    menu = render_menu("v1.5.0", "upstream")
    assert "  (p)ush   - git push upstream && git push upstream --tags\n" in menu
