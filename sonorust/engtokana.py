"""Convert English words in a text to katakana readings using a bep-eng dictionary."""

from __future__ import annotations

import logging
from itertools import groupby
from pathlib import Path

import requests

log = logging.getLogger(__name__)

BEPENG_DIC_URL = (
    "https://fastapi.metacpan.org/source/MASH/Lingua-JA-Yomi-0.01/lib/Lingua/JA/bep-eng.dic"
)
BEPENG_DIC_FOLDER = Path("./appdata/downloads")
BEPENG_DIC_PATH = BEPENG_DIC_FOLDER / "bep-eng.dic"


def parse_dictionary(text: str) -> dict[str, str]:
    """Parse dictionary text: one "WORD reading" pair per line, '#' starts a comment."""
    dictionary: dict[str, str] = {}
    for line in text.split("\n"):
        if not line or line.startswith("#"):
            continue
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed dictionary line: {line!r}")
        dictionary[parts[0]] = parts[1]
    return dictionary


def load_dictionary(path: str | Path) -> dict[str, str]:
    """Read and parse a dictionary file."""
    return parse_dictionary(Path(path).read_text(encoding="utf-8"))


def download_init_dic(
    path: str | Path = BEPENG_DIC_PATH, url: str = BEPENG_DIC_URL
) -> dict[str, str]:
    """Download the dictionary unless it already exists, then load it."""
    path = Path(path)
    if not path.exists():
        log.info("Downloading kana reading dictionary...")
        response = requests.get(url, timeout=60)
        response.raise_for_status()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.content)
        log.info("Kana reading dictionary download is complete.")
    return load_dictionary(path)


def _is_ascii_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def split_en_other(target_text: str) -> list[str]:
    """Split text into runs of ASCII letters and runs of everything else."""
    return ["".join(run) for _, run in groupby(target_text, key=_is_ascii_alpha)]


def is_convert_target(word: str) -> bool:
    """True when the word is ASCII and not made only of upper-case letters."""
    return word.isascii() and not all(char.isupper() for char in word)


class EngToKana:
    """Converter backed by a mapping of upper-case English words to readings."""

    def __init__(self, dictionary: dict[str, str]) -> None:
        self.dictionary = dictionary

    def convert_all(self, target_text: str) -> str:
        """Convert every English word in the text, splitting joined words."""
        return "".join(
            self.convert_single_word(piece)
            for chunk in split_en_other(target_text)
            for piece in self.split_word(chunk)
        )

    def convert_single_word(self, word: str) -> str:
        """Convert one word; words that cannot be converted come back unchanged."""
        if not is_convert_target(word):
            return word
        return self.dictionary.get(word.upper(), word)

    def split_word(self, target_str: str) -> list[str]:
        """Split joined English words by the longest known prefix, recursively."""
        if not is_convert_target(target_str):
            return [target_str]

        upper = target_str.upper()
        if upper in self.dictionary:
            return [target_str]

        for i in reversed(range(len(target_str))):
            if upper[:i] in self.dictionary:
                suffix = target_str[i:]
                if suffix:
                    return [target_str[:i], *self.split_word(suffix)]
                return [target_str[:i]]

        return [target_str]