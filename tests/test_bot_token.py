import io

from sonorust.bot_token import get_or_set_token, input_token


def fail_input():
    raise AssertionError("input must not be requested")


def test_existing_token_is_returned_unchanged(tmp_path):
    path = tmp_path / "BOT_TOKEN"
    path.write_text("token", encoding="utf-8")
    assert get_or_set_token(path, fail_input, io.StringIO()) == "token"


def test_missing_token_is_asked_and_stored(tmp_path):
    path = tmp_path / "appdata" / "BOT_TOKEN"
    out = io.StringIO()
    result = get_or_set_token(path, lambda: "  token \n", out)
    assert result == "token"
    assert path.read_text(encoding="utf-8") == "token"


def test_input_token_masks_echo(tmp_path):
    out = io.StringIO()
    result = input_token(tmp_path / "BOT_TOKEN", lambda: "token", out)
    text = out.getvalue()
    assert text.startswith("Your Bot Token: ")
    assert text.endswith("Your Bot Token: " + "*" * len(result) + "\n")
    assert "token" not in text


def test_stored_token_is_read_back(tmp_path):
    path = tmp_path / "BOT_TOKEN"
    stored = input_token(path, lambda: "token", io.StringIO())
    assert get_or_set_token(path, fail_input, io.StringIO()) == stored