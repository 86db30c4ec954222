# sonorust

Building blocks for a chat bot that reads messages aloud. The package talks
to a Style-Bert-VITS2 compatible HTTP API, turns English words into katakana
readings, keeps the bot's settings in a JSON file, and builds plain data
objects for the embeds, select menus and page buttons the bot shows.

## What is inside

| Module | Purpose |
| --- | --- |
| `sonorust.engtokana` | English to katakana conversion from a word dictionary |
| `sonorust.client` | HTTP client for the speech API (`Sbv2Client`, `Sbv2InferParam`) |
| `sonorust.model_info` | Models, speakers and styles reported by the API |
| `sonorust.settings` | The bot's `settings.json`, with interactive first-time setup |
| `sonorust.bot_token` | Reading or asking for the bot token |
| `sonorust.ui` | Plain data types for embeds, buttons and select menus |
| `sonorust.listing` | Model, speaker, style and dictionary views; `clamp_length` |
| `sonorust.pagination` | Paging through lists of more than 25 entries |
| `sonorust.selection` | Applying a user's model, speaker or style choice |
| `sonorust.server_settings` | Per-server ON/OFF options and their embed and menu |

## Reading English as katakana

The converter works from a dictionary of `WORD READING` lines; blank lines
and lines starting with `#` are skipped. Joined words are split by their
longest known prefix before lookup, and words written all in capitals are
left as they are.

```python
from sonorust.engtokana import EngToKana, load_dictionary

converter = EngToKana(load_dictionary("./appdata/downloads/bep-eng.dic"))
converter.convert_all("こんにちはworld！")   # "こんにちはワールドゥ！"
converter.convert_all("veryveryexcellent")   # "ベリーベリーエクセレントゥ"
```

`download_init_dic(path, url)` downloads the dictionary unless the file
already exists, then returns it loaded as a `dict`. `parse_dictionary`
raises `ValueError` on a line without a reading.

## Talking to the speech API

```python
from sonorust.client import Sbv2Client, Sbv2InferParam

client = Sbv2Client("127.0.0.1", 5000)

if client.is_api_activation():
    model_info = client.update_modelinfo()
    valid = model_info.get_valid_model("my-model", "speaker", "Neutral", "")
    audio = client.infer(
        "こんにちは",
        Sbv2InferParam(
            model_id=valid.model_id,
            speaker_id=valid.speaker_id,
            style_name=valid.style_name,
            length=1.0,
            language="ja",
        ),
    )
```

`update_modelinfo` posts to `/models/refresh` and returns an
`Sbv2ModelInfo`; `parse_modelinfo` builds the same from JSON text or a
decoded object and raises `ModelInfoError` when it is malformed.

`get_valid_model` falls back from an unknown model name to the default
model, then to the model with id 0, and from an unknown speaker or style to
id 0. It raises `ModelInfoError` only when none of these exists.

`normalize_language` accepts `jp`, `ja`, `en` and `zh` in lower case, upper
case or capitalised; anything else is read as `JP`. `voice_url` shows the
exact request `infer` sends.

On Windows, `launch_api_win(sbv2_path, poll_interval)` starts the API server
from a Style-Bert-VITS2 folder through `cmd /C start` and waits, polling
`is_api_activation`, until it answers.

## Settings and token

```python
from sonorust.settings import ConsolePrompter, load_settings

settings = load_settings("./appdata/settings.json", ConsolePrompter())
print(settings.prefix, settings.host, settings.port)
```

When the file is missing or invalid, `load_settings` runs `init_settings`:
the user is asked whether to use the defaults (prefix `sn!`, read limit 50,
API at `127.0.0.1:5000`), then for the languages and inference backend, and
the result is written back. `dump_settings` writes a `SettingsJson`, and
`settings_from_json` parses one, raising `ValueError` when invalid. Any
object with `confirm`, `select` and `text` methods can stand in for
`ConsolePrompter`.

`get_or_set_token(path)` returns the stored bot token, or asks for one with
`input_token`, stores it and redraws the prompt with the token masked.

## Views and paging

- `model_view`, `speaker_view` and `style_view` list the first 25 entries in
  an `Embed` and a `SelectMenu`, adding page buttons when there are more.
  Speaker and style options carry `"model||name"` values.
- `name_list_view` lists up to 24 names without paging.
- `dict_view` shows a server dictionary with add and remove buttons;
  `dict_description` replaces a too long listing with a notice.
- `pagination.move_page(custom_id, model_info, model, current_page, title)`
  builds the next or previous page; `parse_current_page` reads the number on
  the page button.
- `selection.UserVoiceSettings` applies select-menu choices and reports
  whether the model changed.
- `server_settings.GuildOptions` holds the six per-server switches;
  `server_embed`, `server_select_menu` and `apply_toggle_to_embed` build and
  update their view.
- `clamp_length` keeps a speech length within 0.1 to 5.0, rounded to one
  decimal place.

## What the package does not do

It does not connect to a chat service, join voice channels, play audio,
register commands or handle interactions: the views are plain dataclasses
to be turned into messages by the caller. It has no storage for user or
server data; `UserVoiceSettings`, `GuildOptions` and dictionary entries are
kept by the caller. It has no command-line entry point.

## Running the tests

The tests use pytest and responses, listed in the `test` extra:

```
pip install -e .[test]
pytest
```