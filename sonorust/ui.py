"""Plain data types for chat embeds and message components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class ButtonStyle(Enum):
    """Visual style of a button."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4


@dataclass
class EmbedField:
    """One named field of an embed."""

    name: str
    value: str
    inline: bool = False


@dataclass
class Embed:
    """A rich message with a title, description and fields."""

    title: str = ""
    description: str = ""
    fields: list[EmbedField] = field(default_factory=list)
    thumbnail: str | None = None

    def add_field(self, name: str, value: str, inline: bool = False) -> Embed:
        """Append a field and return the embed."""
        self.fields.append(EmbedField(name, value, inline))
        return self

    def field(self, name: str) -> EmbedField:
        """Return the first field with the given name."""
        for item in self.fields:
            if item.name == name:
                return item
        raise KeyError(name)


@dataclass
class Button:
    """A clickable button."""

    custom_id: str
    label: str
    style: ButtonStyle = ButtonStyle.PRIMARY
    disabled: bool = False


@dataclass
class SelectOption:
    """One choice of a select menu."""

    label: str
    value: str


@dataclass
class SelectMenu:
    """A drop-down list of options."""

    custom_id: str
    options: list[SelectOption] = field(default_factory=list)
    placeholder: str | None = None


@dataclass
class ActionRow:
    """A row of buttons or a single select menu."""

    components: list[Union[Button, SelectMenu]] = field(default_factory=list)