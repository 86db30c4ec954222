"""Paging through long lists of models, speakers and styles."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .listing import (
    CHOICE_SEPARATOR,
    CUSTOM_ID_PAGE_MODEL_BACK,
    CUSTOM_ID_PAGE_MODEL_FORWARD,
    CUSTOM_ID_PAGE_MODEL_NUMBER,
    CUSTOM_ID_PAGE_SPEAKER_BACK,
    CUSTOM_ID_PAGE_SPEAKER_FORWARD,
    CUSTOM_ID_PAGE_SPEAKER_NUMBER,
    CUSTOM_ID_PAGE_STYLE_BACK,
    CUSTOM_ID_PAGE_STYLE_FORWARD,
    CUSTOM_ID_PAGE_STYLE_NUMBER,
    CUSTOM_ID_SELECT_MODEL,
    CUSTOM_ID_SELECT_SPEAKER,
    CUSTOM_ID_SELECT_STYLE,
    PAGE_SIZE,
    View,
)
from .model_info import ModelInfo, ModelInfoError, Sbv2ModelInfo
from .ui import ActionRow, Button, ButtonStyle, Embed, SelectMenu, SelectOption

_U32_MAX = 2**32 - 1


def parse_current_page(label: str | None) -> int:
    """Page number shown on the page button; 0 when missing or not a number."""
    if label is None:
        return 0
    digits = label[1:] if label.startswith("+") else label
    if not (digits.isascii() and digits.isdigit()):
        return 0
    value = int(digits)
    return value if value <= _U32_MAX else 0


def _page_items(entries: Mapping[int, str], page: int) -> Iterator[tuple[int, str]]:
    """Yield the entries of one page, stopping at the first missing id."""
    start = page * PAGE_SIZE
    for ident in range(start, start + PAGE_SIZE):
        value = entries.get(ident)
        if value is None:
            return
        yield ident, value


def create_page_embed(title: str, entries: Mapping[int, str], page: int) -> Embed:
    """Embed numbering the entries of the given zero-based page."""
    description = "".join(f"{ident + 1}: {value}\n" for ident, value in _page_items(entries, page))
    return Embed(title=title, description=description)


def create_page_select_menu(
    custom_id: str,
    entries: Mapping[int, str],
    page: int,
    model_name: str | None = None,
) -> SelectMenu:
    """Select menu for one page; values carry the model name when one is given."""
    options = [
        SelectOption(
            value,
            value if model_name is None else f"{model_name}{CHOICE_SEPARATOR}{value}",
        )
        for _, value in _page_items(entries, page)
    ]
    return SelectMenu(custom_id, options)


def button_row_forward(
    current_page: int,
    entries: Mapping[int, str],
    custom_id_back: str,
    custom_id_num: str,
    custom_id_forward: str,
) -> ActionRow:
    """Buttons after moving forward one page from the displayed page number."""
    next_page = current_page + 1
    no_next_page = next_page * PAGE_SIZE not in entries
    return ActionRow(
        [
            Button(custom_id_back, "<-", ButtonStyle.PRIMARY, disabled=False),
            Button(custom_id_num, str(next_page), ButtonStyle.SECONDARY, disabled=True),
            Button(custom_id_forward, "->", ButtonStyle.PRIMARY, disabled=no_next_page),
        ]
    )


def button_row_back(
    current_page: int,
    custom_id_back: str,
    custom_id_num: str,
    custom_id_forward: str,
) -> ActionRow:
    """Buttons after moving back one page from the displayed page number."""
    if current_page < 1:
        raise ValueError("cannot move back from page 0")
    prev_page = current_page - 1
    return ActionRow(
        [
            Button(custom_id_back, "<-", ButtonStyle.PRIMARY, disabled=prev_page == 1),
            Button(custom_id_num, str(prev_page), ButtonStyle.SECONDARY, disabled=True),
            Button(custom_id_forward, "->", ButtonStyle.PRIMARY, disabled=False),
        ]
    )


def _resolve_model(model_info: Sbv2ModelInfo, model: ModelInfo | None) -> ModelInfo:
    if model is not None:
        return model
    fallback = model_info.id_to_model.get(0)
    if fallback is None:
        raise ModelInfoError("no model is available")
    return fallback


def move_page(
    custom_id: str,
    model_info: Sbv2ModelInfo,
    model: ModelInfo | None = None,
    current_page: int = 0,
    title: str = "",
) -> View:
    """Build the page a paging button leads to.

    ``current_page`` is the number shown on the page button (1-based).
    For speaker and style pages ``model`` is the user's model; when it is
    None the model with id 0 is used.
    """
    if custom_id in (CUSTOM_ID_PAGE_MODEL_FORWARD, CUSTOM_ID_PAGE_MODEL_BACK):
        entries = {ident: info.model_name for ident, info in model_info.id_to_model.items()}
        select_id = CUSTOM_ID_SELECT_MODEL
        menu_model_name = None
        ids = (CUSTOM_ID_PAGE_MODEL_BACK, CUSTOM_ID_PAGE_MODEL_NUMBER, CUSTOM_ID_PAGE_MODEL_FORWARD)
        forward = custom_id == CUSTOM_ID_PAGE_MODEL_FORWARD
    elif custom_id in (CUSTOM_ID_PAGE_SPEAKER_FORWARD, CUSTOM_ID_PAGE_SPEAKER_BACK):
        resolved = _resolve_model(model_info, model)
        entries = dict(resolved.id2spk)
        select_id = CUSTOM_ID_SELECT_SPEAKER
        menu_model_name = resolved.model_name
        ids = (
            CUSTOM_ID_PAGE_SPEAKER_BACK,
            CUSTOM_ID_PAGE_SPEAKER_NUMBER,
            CUSTOM_ID_PAGE_SPEAKER_FORWARD,
        )
        forward = custom_id == CUSTOM_ID_PAGE_SPEAKER_FORWARD
    elif custom_id in (CUSTOM_ID_PAGE_STYLE_FORWARD, CUSTOM_ID_PAGE_STYLE_BACK):
        resolved = _resolve_model(model_info, model)
        entries = dict(resolved.id2style)
        select_id = CUSTOM_ID_SELECT_STYLE
        menu_model_name = resolved.model_name
        # Style buttons carry their ids crosswise, matching the first page.
        ids = (
            CUSTOM_ID_PAGE_STYLE_FORWARD,
            CUSTOM_ID_PAGE_STYLE_NUMBER,
            CUSTOM_ID_PAGE_STYLE_BACK,
        )
        forward = custom_id == CUSTOM_ID_PAGE_STYLE_FORWARD
    else:
        raise ValueError(f"unknown paging id {custom_id!r}")

    if forward:
        page = current_page
        row = button_row_forward(current_page, entries, *ids)
    else:
        if current_page < 2:
            raise ValueError("cannot move back from the first page")
        page = current_page - 2
        row = button_row_back(current_page, *ids)

    embed = create_page_embed(title, entries, page)
    menu = create_page_select_menu(select_id, entries, page, menu_model_name)
    return embed, [ActionRow([menu]), row]