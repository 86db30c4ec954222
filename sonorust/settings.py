"""Bot settings stored as JSON, with an interactive first-run setup."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, TextIO

log = logging.getLogger(__name__)

APPDATA_PATH = Path("./appdata")
JSON_PATH = APPDATA_PATH / "settings.json"

_U32_MAX = 2**32 - 1

_SBV2_REQUIRED_FILES = ("server_fastapi.py", "venv/Scripts/python.exe")

Validator = Callable[[str], "str | None"]


class SettingLang(Enum):
    """Language used by the bot or for inference."""

    JA = "Ja"
    EN = "En"

    def __str__(self) -> str:
        return self.value


class InferUse(Enum):
    """Which inference backend to use."""

    PYTHON = "Python"
    RUST = "Rust"

    def __str__(self) -> str:
        return self.value


@dataclass
class SettingsJson:
    """All bot settings."""

    sbv2_path: str | None = None
    read_limit: int = 50
    default_model: str = ""
    prefix: str = "sn!"
    host: str = "127.0.0.1"
    port: int = 5000
    bot_lang: SettingLang = SettingLang.JA
    infer_lang: SettingLang = SettingLang.JA
    infer_use: InferUse = InferUse.PYTHON

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON."""
        data = {
            "sbv2_path": self.sbv2_path,
            "read_limit": self.read_limit,
            "default_model": self.default_model,
            "prefix": self.prefix,
            "host": self.host,
            "port": self.port,
            "bot_lang": self.bot_lang.value,
            "infer_lang": self.infer_lang.value,
            "infer_use": self.infer_use.value,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)


class _Prompter(Protocol):
    def confirm(self, prompt: str, default: bool) -> bool: ...

    def select(self, prompt: str, choices: Sequence[str]) -> int: ...

    def text(self, prompt: str, initial: str, validate: Validator | None = None) -> str: ...


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    return data[key]


def _u32(data: dict[str, Any], key: str) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"{key} must be an unsigned 32-bit integer")
    return value


def _string(data: dict[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _enum(data: dict[str, Any], key: str, kind: type[Enum]) -> Any:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return kind(value)


def settings_from_json(text: str) -> SettingsJson:
    """Parse settings from JSON text; raise ValueError when it is invalid."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid settings JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("settings must be a JSON object")

    sbv2_path = data.get("sbv2_path")
    if sbv2_path is not None and not isinstance(sbv2_path, str):
        raise ValueError("sbv2_path must be a string or null")

    return SettingsJson(
        sbv2_path=sbv2_path,
        read_limit=_u32(data, "read_limit"),
        default_model=_string(data, "default_model"),
        prefix=_string(data, "prefix"),
        host=_string(data, "host"),
        port=_u32(data, "port"),
        bot_lang=_enum(data, "bot_lang", SettingLang),
        infer_lang=_enum(data, "infer_lang", SettingLang),
        infer_use=_enum(data, "infer_use", InferUse),
    )


def load_settings(path: str | Path = JSON_PATH, prompter: _Prompter | None = None) -> SettingsJson:
    """Load settings, running the interactive setup when the file is missing or invalid."""
    path = Path(path)
    prompter = prompter or ConsolePrompter()
    while True:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            text = init_settings(path, prompter)
        try:
            return settings_from_json(text)
        except ValueError:
            init_settings(path, prompter)


def dump_settings(settings: SettingsJson, path: str | Path = JSON_PATH) -> None:
    """Write settings to the JSON file, creating its folder."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(settings.to_json(), encoding="utf-8")


def init_settings(path: str | Path = JSON_PATH, prompter: _Prompter | None = None) -> str:
    """Ask the user for settings, write them and return the JSON text."""
    log.info("Perform initial settings.")
    prompter = prompter or ConsolePrompter()
    use_default = prompter.confirm("Do you want to use the default settings?", True)
    settings = default_process(prompter) if use_default else not_default_process(prompter)
    dump_settings(settings, path)
    return settings.to_json()


def _backend_and_path(prompter: _Prompter) -> tuple[InferUse, str | None]:
    infer_use = select_infer_use(prompter)
    sbv2_path = input_sbv2_path(prompter) if infer_use is InferUse.PYTHON else None
    return infer_use, sbv2_path


def default_process(prompter: _Prompter) -> SettingsJson:
    """Settings built from defaults plus language and backend choices."""
    bot_lang, infer_lang = select_lang(prompter)
    infer_use, sbv2_path = _backend_and_path(prompter)
    return SettingsJson(
        sbv2_path=sbv2_path,
        bot_lang=bot_lang,
        infer_lang=infer_lang,
        infer_use=infer_use,
    )


def _validate_u32(value: str) -> str | None:
    try:
        number = int(value.strip())
    except ValueError:
        return "Please enter a number."
    if not 0 <= number <= _U32_MAX:
        return "The number is out of range."
    return None


def not_default_process(prompter: _Prompter) -> SettingsJson:
    """Settings where every value is entered by the user."""
    read_limit = int(
        prompter.text("Input `Maximum number of characters to read`", "50", _validate_u32).strip()
    )
    default_model = prompter.text("Input `Default model name`", "None")
    prefix = prompter.text("Input `Prefix`", "sn!")
    host = prompter.text("Input `SBV2 API host`", "127.0.0.1")
    port = int(prompter.text("Input `SBV2 API port`", "5000", _validate_u32).strip())

    bot_lang, infer_lang = select_lang(prompter)
    infer_use, sbv2_path = _backend_and_path(prompter)
    return SettingsJson(
        sbv2_path=sbv2_path,
        read_limit=read_limit,
        default_model=default_model,
        prefix=prefix,
        host=host,
        port=port,
        bot_lang=bot_lang,
        infer_lang=infer_lang,
        infer_use=infer_use,
    )


def select_lang(prompter: _Prompter) -> tuple[SettingLang, SettingLang]:
    """Ask for the bot language and the inference language."""
    bot = prompter.select("Select Bot language:", ["En (Google or DeepL translate)", "Ja"])
    infer = prompter.select("Select SBV2 Infer language:", ["En", "Ja", "Zh"])

    def to_lang(index: int) -> SettingLang:
        return SettingLang.EN if index == 0 else SettingLang.JA

    return to_lang(bot), to_lang(infer)


def select_infer_use(prompter: _Prompter) -> InferUse:
    """Ask which inference backend to use."""
    choices = ["litagin02/Style-Bert-VITS2 (Default)", "tuna2134/sbv2-api"]
    index = prompter.select("Select the library to use for inference:", choices)
    return InferUse.RUST if index == 1 else InferUse.PYTHON


def _validate_sbv2_path(value: str | Path) -> str | None:
    """Return an error message when the folder is not a server folder."""
    folder = Path(value)
    missing = [name for name in _SBV2_REQUIRED_FILES if not (folder / name).exists()]
    if missing:
        return "The path you entered is not an SBV2 path."
    return None


def is_sbv2_path(path: str | Path) -> bool:
    """True when the folder holds the API server script and its Python."""
    return _validate_sbv2_path(path) is None


def input_sbv2_path(prompter: _Prompter) -> str | None:
    """Ask for the server folder used to start the API automatically."""
    wanted = prompter.confirm(
        "Do you want to set the path for SBV2 to start automatically?", True
    )
    if not wanted:
        return None
    return prompter.text("Please enter the SBV2 path", "", _validate_sbv2_path)


@dataclass
class ConsolePrompter:
    """Asks questions on a text console."""

    input_func: Callable[[], str] = input
    output: TextIO | None = None

    def _write(self, text: str) -> None:
        out = self.output or sys.stdout
        out.write(text)
        out.flush()

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self.input_func()

    def confirm(self, prompt: str, default: bool) -> bool:
        """Ask a yes/no question; an empty answer takes the default."""
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._ask(f"{prompt} {hint} ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._write("Please answer y or n.\n")

    def select(self, prompt: str, choices: Sequence[str]) -> int:
        """Ask for one of the choices and return its index."""
        self._write(f"{prompt}\n")
        for number, choice in enumerate(choices, start=1):
            self._write(f"  {number}) {choice}\n")
        while True:
            answer = self._ask("> ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return int(answer) - 1
            self._write(f"Please enter a number from 1 to {len(choices)}.\n")

    def text(self, prompt: str, initial: str, validate: Validator | None = None) -> str:
        """Ask for text; an empty answer takes the initial text."""
        while True:
            answer = self._ask(f"{prompt} [{initial}]: ").strip() or initial
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self._write(f"{error}\n")