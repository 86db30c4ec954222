"""HTTP client for the speech synthesis API."""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote, urlencode

import requests

from .model_info import Sbv2ModelInfo, parse_modelinfo

log = logging.getLogger(__name__)

_LANGUAGES = {
    "jp": "JP",
    "ja": "JP",
    "en": "EN",
    "zh": "ZH",
}
_ACCEPTED_SPELLINGS = {
    spelling
    for code in _LANGUAGES
    for spelling in (code, code.upper(), code.capitalize())
}

SDP_RATIO = 0.2
NOISE = 0.6
NOISEW = 0.8


def normalize_language(language: str) -> str:
    """Map a language name to the API's code; anything unknown becomes JP."""
    if language in _ACCEPTED_SPELLINGS:
        return _LANGUAGES[language.lower()]
    return "JP"


def _format_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass
class Sbv2InferParam:
    """Parameters for one synthesis request."""

    model_id: int
    speaker_id: int
    style_name: str
    length: float
    language: str


class Sbv2Client:
    """Client bound to one API host and port."""

    def __init__(
        self, host: str, port: int, session: requests.Session | None = None
    ) -> None:
        self.host = host
        self.port = port
        self.session = session or requests.Session()

    @property
    def _base(self) -> str:
        return f"http://{self.host}:{self.port}"

    def refresh_url(self) -> str:
        """URL that refreshes and lists the models."""
        return f"{self._base}/models/refresh"

    def voice_url(self, text: str, param: Sbv2InferParam) -> str:
        """URL that synthesizes the text with the given parameters."""
        query = [
            ("text", text),
            ("encoding", "utf-8"),
            ("model_id", str(param.model_id)),
            ("speaker_id", str(param.speaker_id)),
            ("sdp_ratio", _format_number(SDP_RATIO)),
            ("noise", _format_number(NOISE)),
            ("noisew", _format_number(NOISEW)),
            ("length", _format_number(param.length)),
            ("language", normalize_language(param.language)),
            ("auto_split", "true"),
            ("split_interval", "0.5"),
            ("assist_text_weight", "1"),
            ("style", param.style_name),
            ("style_weight", "5"),
        ]
        return f"{self._base}/voice?{urlencode(query, quote_via=quote)}"

    def update_modelinfo(self) -> Sbv2ModelInfo:
        """Ask the API to refresh its models and return their information."""
        response = self.session.post(self.refresh_url())
        return parse_modelinfo(response.text)

    def is_api_activation(self) -> bool:
        """True when the API answers at all."""
        try:
            self.session.get(self.refresh_url())
        except requests.RequestException:
            return False
        return True

    def infer(self, text: str, param: Sbv2InferParam) -> bytes:
        """Synthesize the text and return the audio bytes."""
        response = self.session.get(self.voice_url(text, param))
        return response.content

    def launch_api_win(self, sbv2_path: str | Path, poll_interval: float = 3.0) -> None:
        """Start the API server on Windows and wait until it answers."""
        sbv2_path = Path(sbv2_path)
        python_path = sbv2_path / "venv/Scripts/python.exe"
        api_py_path = sbv2_path / "server_fastapi.py"

        subprocess.run(
            ["cmd", "/C", "start", str(python_path), str(api_py_path)],
            cwd=sbv2_path,
            check=False,
        )

        while not self.is_api_activation():
            time.sleep(poll_interval)