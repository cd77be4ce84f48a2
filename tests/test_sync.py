from hubkit.sync import (
    SyncColors,
    deleted_message,
    parse_branch_remotes,
    updated_message,
)

SHA = "08f4b7b6513dffc6245857e497cfd6101dc47818"


def test_colors_disabled_are_empty():
    colors = SyncColors.for_output(False)
    values = (colors.green, colors.light_green, colors.red, colors.light_red, colors.reset)
    assert values == ("", "", "", "", "")


def test_colors_enabled_use_ansi_codes():
    colors = SyncColors.for_output(True)
    assert colors.green == "\033[32m"
    assert colors.light_green == "\033[32;1m"
    assert colors.red == "\033[31m"
    assert colors.light_red == "\033[31;1m"
    assert colors.reset == "\033[0m"


def test_parse_branch_remotes():
    lines = [
        "branch.main.remote origin",
        "branch.feature.remote upstream",
        "not a branch line",
    ]
    assert parse_branch_remotes(lines) == {"main": "origin", "feature": "upstream"}


def test_parse_branch_remotes_with_dotted_branch():
    result = parse_branch_remotes(["branch.release.v1.remote origin"])
    assert result == {"release.v1": "origin"}


def test_parse_branch_remotes_later_wins():
    result = parse_branch_remotes(["branch.main.remote origin", "branch.main.remote fork"])
    assert result == {"main": "fork"}


def test_parse_branch_remotes_empty():
    assert parse_branch_remotes([]) == {}


def test_updated_message_plain():
    message = updated_message("main", SHA, SyncColors.for_output(False))
    assert message == "Updated branch main (was 08f4b7b)."


def test_deleted_message_plain():
    message = deleted_message("topic", SHA, SyncColors.for_output(False))
    assert message == "Deleted branch topic (was 08f4b7b)."


def test_updated_message_colored_wraps_branch():
    colors = SyncColors.for_output(True)
    message = updated_message("main", SHA, colors)
    assert message.startswith(colors.green)
    assert colors.light_green + "main" + colors.reset in message
    assert message.endswith(f"(was {SHA[:7]}).")


def test_deleted_message_colored_wraps_branch():
    colors = SyncColors.for_output(True)
    message = deleted_message("topic", SHA, colors)
    assert message.startswith(colors.red)
    assert colors.light_red + "topic" + colors.reset in message


def test_messages_abbreviate_sha_to_seven_chars():
    colors = SyncColors.for_output(False)
    message = updated_message("x", SHA, colors)
    assert SHA[:7] in message
    assert SHA[:8] not in message