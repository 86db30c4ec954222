import pytest

from sonorust.ui import (
    ActionRow,
    Button,
    ButtonStyle,
    Embed,
    EmbedField,
    SelectMenu,
    SelectOption,
)


def test_add_field_appends_in_order():
    embed = Embed(title="t")
    returned = embed.add_field("a", "1").add_field("b", "2", inline=True)
    assert returned is embed
    assert embed.fields == [EmbedField("a", "1", False), EmbedField("b", "2", True)]


def test_field_lookup_returns_first_match():
    embed = Embed().add_field("x", "first").add_field("x", "second")
    assert embed.field("x").value == "first"


def test_field_lookup_is_mutable_in_place():
    embed = Embed().add_field("switch", "OFF")
    embed.field("switch").value = "ON"
    assert embed.fields[0].value == "ON"


def test_field_missing():
    with pytest.raises(KeyError):
        Embed().field("missing")


def test_button_defaults():
    button = Button("id", "->")
    assert button.style is ButtonStyle.PRIMARY
    assert button.disabled is False


def test_row_holds_components():
    menu = SelectMenu("menu", [SelectOption("a", "a")])
    row = ActionRow([menu])
    assert row.components[0].options[0].value == "a"
    assert menu.placeholder is None


def test_separate_embeds_do_not_share_fields():
    first = Embed().add_field("a", "1")
    second = Embed()
    assert second.fields == []
    assert len(first.fields) == 1