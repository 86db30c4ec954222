"""Embeds and components that list models, speakers, styles and dictionary entries."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping, Sequence
from typing import TypeVar

from .model_info import ModelInfo, Sbv2ModelInfo
from .ui import ActionRow, Button, ButtonStyle, Embed, SelectMenu, SelectOption

MODEL_LIST_TITLE = "使用できるモデル一覧"

PAGE_SIZE = 25
CHOICE_SEPARATOR = "||"

CUSTOM_ID_SELECT_MODEL = "select_model"
CUSTOM_ID_SELECT_SPEAKER = "select_speaker"
CUSTOM_ID_SELECT_STYLE = "select_style"

CUSTOM_ID_PAGE_MODEL_BACK = "page_model_back"
CUSTOM_ID_PAGE_MODEL_NUMBER = "page_model_number"
CUSTOM_ID_PAGE_MODEL_FORWARD = "page_model_forward"
CUSTOM_ID_PAGE_SPEAKER_BACK = "page_speaker_back"
CUSTOM_ID_PAGE_SPEAKER_NUMBER = "page_speaker_number"
CUSTOM_ID_PAGE_SPEAKER_FORWARD = "page_speaker_forward"
CUSTOM_ID_PAGE_STYLE_BACK = "page_style_back"
CUSTOM_ID_PAGE_STYLE_NUMBER = "page_style_number"
CUSTOM_ID_PAGE_STYLE_FORWARD = "page_style_forward"

CUSTOM_ID_DICT_ADD = "dict_add"
CUSTOM_ID_DICT_REMOVE = "dict_remove"
DICT_LABEL_ADD = "Add"
DICT_LABEL_REMOVE = "Remove"

MIN_LENGTH = 0.1
MAX_LENGTH = 5.0
DICT_DESCRIPTION_LIMIT = 4000

View = tuple[Embed, list[ActionRow]]

_V = TypeVar("_V")


def _leading(mapping: Mapping[int, _V], limit: int = PAGE_SIZE) -> Iterator[tuple[int, _V]]:
    """Yield (id, value) for ids 0, 1, 2, ... up to the limit, stopping at the first gap."""
    for ident in range(limit):
        value = mapping.get(ident)
        if value is None:
            return
        yield ident, value


def _numbered_lines(names: Sequence[str]) -> str:
    return "".join(f"{number}: {name}\n" for number, name in enumerate(names, start=1))


def _first_page_buttons(back_id: str, number_id: str, forward_id: str) -> ActionRow:
    return ActionRow(
        [
            Button(back_id, "<-", ButtonStyle.PRIMARY, disabled=True),
            Button(number_id, "1", ButtonStyle.SECONDARY, disabled=True),
            Button(forward_id, "->", ButtonStyle.PRIMARY, disabled=False),
        ]
    )


def model_view(model_info: Sbv2ModelInfo, title: str = MODEL_LIST_TITLE) -> View:
    """First page of the API's models, with page buttons when there are more than 25."""
    names = [model.model_name for _, model in _leading(model_info.id_to_model)]
    embed = Embed(title=title, description=_numbered_lines(names))
    menu = SelectMenu(CUSTOM_ID_SELECT_MODEL, [SelectOption(name, name) for name in names])
    rows = [ActionRow([menu])]
    if len(model_info.id_to_model) > PAGE_SIZE:
        rows.append(
            _first_page_buttons(
                CUSTOM_ID_PAGE_MODEL_BACK,
                CUSTOM_ID_PAGE_MODEL_NUMBER,
                CUSTOM_ID_PAGE_MODEL_FORWARD,
            )
        )
    return embed, rows


def name_list_view(names: Sequence[str], title: str = MODEL_LIST_TITLE) -> View:
    """List of model names (at most 24) with a select menu and no paging."""
    shown = list(names[: PAGE_SIZE - 1])
    embed = Embed(title=title, description=_numbered_lines(shown))
    menu = SelectMenu(CUSTOM_ID_SELECT_MODEL, [SelectOption(name, name) for name in shown])
    return embed, [ActionRow([menu])]


def _member_view(
    model: ModelInfo,
    id_to_name: Mapping[int, str],
    title: str,
    select_id: str,
    button_ids: tuple[str, str, str],
) -> View:
    names = [name for _, name in _leading(id_to_name)]
    embed = Embed(title=title, description=_numbered_lines(names))
    menu = SelectMenu(
        select_id,
        [SelectOption(name, f"{model.model_name}{CHOICE_SEPARATOR}{name}") for name in names],
    )
    rows = [ActionRow([menu])]
    if len(id_to_name) > PAGE_SIZE:
        rows.append(_first_page_buttons(*button_ids))
    return embed, rows


def speaker_view(model: ModelInfo, title: str) -> View:
    """First page of a model's speakers."""
    return _member_view(
        model,
        model.id2spk,
        title,
        CUSTOM_ID_SELECT_SPEAKER,
        (
            CUSTOM_ID_PAGE_SPEAKER_BACK,
            CUSTOM_ID_PAGE_SPEAKER_NUMBER,
            CUSTOM_ID_PAGE_SPEAKER_FORWARD,
        ),
    )


def style_view(model: ModelInfo, title: str) -> View:
    """First page of a model's styles."""
    # The style page buttons carry their ids crosswise; paging relies on this.
    return _member_view(
        model,
        model.id2style,
        title,
        CUSTOM_ID_SELECT_STYLE,
        (
            CUSTOM_ID_PAGE_STYLE_FORWARD,
            CUSTOM_ID_PAGE_STYLE_NUMBER,
            CUSTOM_ID_PAGE_STYLE_BACK,
        ),
    )


def clamp_length(length: float) -> float:
    """Keep a speech length within 0.1..5.0 and round it to one decimal place."""
    if length <= MIN_LENGTH:
        length = MIN_LENGTH
    elif length >= MAX_LENGTH:
        length = MAX_LENGTH
    return math.floor(length * 10.0 + 0.5) / 10.0


def dict_description(
    entries: Mapping[str, str], unregistered: str, too_many: str
) -> str:
    """Text listing the dictionary entries, or a notice when empty or too long."""
    if not entries:
        description = unregistered
    else:
        description = "\n".join(f"{key} -> {value}" for key, value in entries.items())
    if len(description.encode("utf-8")) >= DICT_DESCRIPTION_LIMIT:
        return too_many
    return description


def dict_view(
    title: str, entries: Mapping[str, str], unregistered: str, too_many: str
) -> View:
    """Embed with the server dictionary and buttons to add or remove entries."""
    embed = Embed(title=title, description=dict_description(entries, unregistered, too_many))
    buttons = ActionRow(
        [
            Button(CUSTOM_ID_DICT_ADD, DICT_LABEL_ADD, ButtonStyle.PRIMARY),
            Button(CUSTOM_ID_DICT_REMOVE, DICT_LABEL_REMOVE, ButtonStyle.SECONDARY),
        ]
    )
    return embed, [buttons]