"""Per-server option toggles and their embed and select menu."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .ui import ActionRow, Embed, SelectMenu, SelectOption

CUSTOM_ID_CHANGE_SERVER_SETTINGS = "change_server_settings"

OPTION_KEYS: tuple[str, ...] = (
    "is_auto_join",
    "is_dic_onlyadmin",
    "is_entrance_exit_log",
    "is_entrance_exit_play",
    "is_notice_attachment",
    "is_if_long_fastread",
)

_ON_OFF_TEXT: dict[bool, str] = {True: "ON", False: "OFF"}


def on_off(value: bool) -> str:
    """Display text for a boolean option."""
    return _ON_OFF_TEXT[bool(value)]


@dataclass
class GuildOptions:
    """Switchable options of one server."""

    is_auto_join: bool = False
    is_dic_onlyadmin: bool = False
    is_entrance_exit_log: bool = False
    is_entrance_exit_play: bool = False
    is_notice_attachment: bool = False
    is_if_long_fastread: bool = False

    def toggle(self, key: str) -> bool:
        """Flip the named option and return its new value."""
        if key not in OPTION_KEYS:
            raise KeyError(key)
        value = not getattr(self, key)
        setattr(self, key, value)
        return value


def server_embed(title: str, options: GuildOptions, labels: Mapping[str, str]) -> Embed:
    """Embed listing every option with its ON/OFF state."""
    embed = Embed(title=title)
    for key in OPTION_KEYS:
        embed.add_field(labels[key], on_off(getattr(options, key)), False)
    return embed


def server_select_menu(labels: Mapping[str, str], placeholder: str) -> ActionRow:
    """Row with a select menu offering every option to toggle."""
    menu = SelectMenu(
        custom_id=CUSTOM_ID_CHANGE_SERVER_SETTINGS,
        options=[SelectOption(labels[key], key) for key in OPTION_KEYS],
        placeholder=placeholder,
    )
    return ActionRow([menu])


def apply_toggle_to_embed(
    embed: Embed, options: GuildOptions, key: str, labels: Mapping[str, str]
) -> bool:
    """Toggle an option and update its field in the embed; return the new value."""
    new_value = options.toggle(key)
    embed.field(labels[key]).value = on_off(new_value)
    return new_value