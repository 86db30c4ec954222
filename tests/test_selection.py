import pytest

from sonorust.selection import UserVoiceSettings, parse_choice


def test_parse_choice_splits_model_and_name():
    assert parse_choice("alpha||beta") == ("alpha", "beta")


def test_parse_choice_ignores_extra_parts():
    assert parse_choice("a||b||c") == ("a", "b")


def test_parse_choice_without_separator_raises():
    with pytest.raises(ValueError):
        parse_choice("no separator")


def test_choose_model_resets_speaker_and_style():
    user = UserVoiceSettings("old", "spk", "sty")
    user.choose_model("new")
    assert user == UserVoiceSettings("new", "", "")


def test_choose_speaker_same_model():
    user = UserVoiceSettings("m", "s1", "happy")
    assert user.choose_speaker("m||s2") == (False, "m")
    assert user == UserVoiceSettings("m", "s2", "")


def test_choose_speaker_changes_model():
    user = UserVoiceSettings("old", "s1", "happy")
    assert user.choose_speaker("new||s2") == (True, "old")
    assert user.model_name == "new"
    assert user.style_name == ""


def test_choose_style_keeps_speaker():
    user = UserVoiceSettings("m", "spk", "")
    assert user.choose_style("m||calm") == (False, "m")
    assert user == UserVoiceSettings("m", "spk", "calm")


def test_choose_style_changes_model():
    user = UserVoiceSettings("old", "spk", "x")
    changed, before = user.choose_style("other||calm")
    assert changed
    assert before == "old"
    assert user.model_name == "other"


def test_bad_choice_leaves_settings_untouched():
    user = UserVoiceSettings("m", "s", "t")
    with pytest.raises(ValueError):
        user.choose_speaker("broken")
    assert user == UserVoiceSettings("m", "s", "t")