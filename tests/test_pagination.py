import pytest

from sonorust.listing import (
    CUSTOM_ID_PAGE_MODEL_BACK,
    CUSTOM_ID_PAGE_MODEL_FORWARD,
    CUSTOM_ID_PAGE_MODEL_NUMBER,
    CUSTOM_ID_PAGE_SPEAKER_FORWARD,
    CUSTOM_ID_PAGE_STYLE_BACK,
    CUSTOM_ID_PAGE_STYLE_FORWARD,
    CUSTOM_ID_SELECT_MODEL,
    CUSTOM_ID_SELECT_SPEAKER,
)
from sonorust.model_info import ModelInfo, ModelInfoError, Sbv2ModelInfo
from sonorust.pagination import (
    button_row_back,
    button_row_forward,
    create_page_embed,
    create_page_select_menu,
    move_page,
    parse_current_page,
)


def _entries(count):
    return {i: f"name{i}" for i in range(count)}


def _model(model_id, name, count):
    spk = {f"spk{i}": i for i in range(count)}
    style = {f"sty{i}": i for i in range(count)}
    return ModelInfo(
        model_id=model_id,
        model_name=name,
        spk2id=spk,
        id2spk={v: k for k, v in spk.items()},
        style2id=style,
        id2style={v: k for k, v in style.items()},
    )


def _info(count, members=30):
    info = Sbv2ModelInfo()
    for i in range(count):
        model = _model(i, f"model{i}", members)
        info.id_to_model[i] = model
        info.name_to_model[model.model_name] = model
    return info


@pytest.mark.parametrize(
    "label, expected",
    [("3", 3), ("+4", 4), ("abc", 0), ("", 0), (None, 0), ("-1", 0)],
)
def test_parse_current_page(label, expected):
    assert parse_current_page(label) == expected


def test_first_page_embed_has_25_lines():
    embed = create_page_embed("title", _entries(30), 0)
    lines = embed.description.splitlines()
    assert embed.title == "title"
    assert len(lines) == 25
    assert lines[0] == "1: name0"


def test_second_page_embed_holds_remaining_entries():
    lines = create_page_embed("t", _entries(30), 1).description.splitlines()
    assert len(lines) == 5
    assert lines[0] == "26: name25"


def test_embed_stops_at_gap():
    entries = {0: "a", 1: "b", 3: "d"}
    lines = create_page_embed("t", entries, 0).description.splitlines()
    assert len(lines) == 2
    assert all(line.endswith(("a", "b")) for line in lines)


def test_select_menu_without_model_name():
    menu = create_page_select_menu("sel", _entries(30), 1, None)
    assert menu.custom_id == "sel"
    assert len(menu.options) == 5
    assert all(option.label == option.value for option in menu.options)


def test_select_menu_with_model_name():
    menu = create_page_select_menu("sel", _entries(3), 0, "mymodel")
    assert [o.value for o in menu.options] == [f"mymodel||{o.label}" for o in menu.options]


def test_forward_row_disables_forward_without_next_page():
    row = button_row_forward(1, _entries(30), "b", "n", "f")
    back, number, forward = row.components
    assert number.label == "2"
    assert number.disabled
    assert not back.disabled
    assert forward.disabled


def test_forward_row_enables_forward_with_next_page():
    row = button_row_forward(1, _entries(60), "b", "n", "f")
    assert not row.components[2].disabled
    assert [b.custom_id for b in row.components] == ["b", "n", "f"]


def test_back_row_disables_back_on_first_page():
    back, number, forward = button_row_back(2, "b", "n", "f").components
    assert number.label == "1"
    assert back.disabled
    assert not forward.disabled


def test_back_row_keeps_back_enabled_later():
    back, number, _ = button_row_back(3, "b", "n", "f").components
    assert number.label == "2"
    assert not back.disabled


def test_back_row_rejects_page_zero():
    with pytest.raises(ValueError):
        button_row_back(0, "b", "n", "f")


def test_move_page_model_forward_then_back():
    info = _info(30)
    embed, rows = move_page(CUSTOM_ID_PAGE_MODEL_FORWARD, info, None, 1, "Models")
    menu = rows[0].components[0]
    assert menu.custom_id == CUSTOM_ID_SELECT_MODEL
    assert [o.label for o in menu.options] == [f"model{i}" for i in range(25, 30)]
    assert rows[1].components[1].label == "2"

    embed_back, rows_back = move_page(CUSTOM_ID_PAGE_MODEL_BACK, info, None, 2, "Models")
    assert len(embed_back.description.splitlines()) == 25
    ids = [b.custom_id for b in rows_back.components] if False else [
        b.custom_id for b in rows_back[1].components
    ]
    assert ids == [
        CUSTOM_ID_PAGE_MODEL_BACK,
        CUSTOM_ID_PAGE_MODEL_NUMBER,
        CUSTOM_ID_PAGE_MODEL_FORWARD,
    ]
    assert rows_back[1].components[0].disabled


def test_move_page_speaker_uses_given_model():
    info = _info(2)
    model = info.id_to_model[1]
    embed, rows = move_page(CUSTOM_ID_PAGE_SPEAKER_FORWARD, info, model, 1, "Speakers")
    menu = rows[0].components[0]
    assert menu.custom_id == CUSTOM_ID_SELECT_SPEAKER
    assert all(o.value.startswith("model1||") for o in menu.options)
    assert embed.title == "Speakers"


def test_move_page_speaker_falls_back_to_model_zero():
    info = _info(2)
    _, rows = move_page(CUSTOM_ID_PAGE_SPEAKER_FORWARD, info, None, 1, "t")
    assert all(o.value.startswith("model0||") for o in rows[0].components[0].options)


def test_move_page_style_buttons_are_crosswise():
    info = _info(1)
    _, rows = move_page(CUSTOM_ID_PAGE_STYLE_FORWARD, info, None, 1, "t")
    assert rows[1].components[0].custom_id == CUSTOM_ID_PAGE_STYLE_FORWARD
    assert rows[1].components[2].custom_id == CUSTOM_ID_PAGE_STYLE_BACK


def test_move_page_back_from_first_page_raises():
    with pytest.raises(ValueError):
        move_page(CUSTOM_ID_PAGE_MODEL_BACK, _info(30), None, 1, "t")


def test_move_page_unknown_id_raises():
    with pytest.raises(ValueError):
        move_page("nonsense", _info(1), None, 1, "t")


def test_move_page_without_models_raises():
    with pytest.raises(ModelInfoError):
        move_page(CUSTOM_ID_PAGE_SPEAKER_FORWARD, Sbv2ModelInfo(), None, 1, "t")