from aegisbot.interactions import (
    ComponentAction,
    ComponentKind,
    disable_encryption_response,
    parse_custom_id,
    reference_response,
)


def test_parse_view_ref():
    assert parse_custom_id("view_ref:abc123") == ComponentAction(
        ComponentKind.VIEW_REFERENCE, "abc123"
    )


def test_parse_view_ref_strips_repeated_prefix():
    action = parse_custom_id("view_ref:view_ref:xyz")
    assert action.reference_id == "xyz"


def test_parse_view_ref_empty_id():
    action = parse_custom_id("view_ref:")
    assert action.kind is ComponentKind.VIEW_REFERENCE
    assert action.reference_id == ""


def test_parse_disable_encryption():
    action = parse_custom_id("disable_encryption")
    assert action.kind is ComponentKind.DISABLE_ENCRYPTION
    assert action.reference_id is None


def test_parse_unknown():
    assert parse_custom_id("first") is None
    assert parse_custom_id("disable_encryption_now") is None


def test_reference_missing():
    assert reference_response(False, False) == (
        "This reference could not be found in the database."
    )


def test_reference_empty():
    assert reference_response(True, False) == "This reference is empty."


def test_reference_shown():
    assert reference_response(True, True) is None


def test_disable_encryption_admin():
    content, ephemeral = disable_encryption_response(True)
    assert content == (
        "**ENCRYPTION DISABLED**\nAll previously cached messages have been wiped."
    )
    assert ephemeral is False


def test_disable_encryption_non_admin_silent():
    assert disable_encryption_response(False) is None


def test_disable_encryption_unknown_permissions():
    content, ephemeral = disable_encryption_response(None)
    assert content.startswith("You do not have permission to disable encryption.")
    assert ephemeral is True