"""Applying a user's model, speaker and style choices."""

from __future__ import annotations

from dataclasses import dataclass

from .listing import CHOICE_SEPARATOR


def parse_choice(value: str) -> tuple[str, str]:
    """Split a "model||name" select value into its model and name."""
    parts = value.split(CHOICE_SEPARATOR)
    if len(parts) < 2:
        raise ValueError(f"select value has no {CHOICE_SEPARATOR!r}: {value!r}")
    return parts[0], parts[1]


@dataclass
class UserVoiceSettings:
    """The voice a user has chosen."""

    model_name: str = ""
    speaker_name: str = ""
    style_name: str = ""

    def choose_model(self, model_name: str) -> None:
        """Switch model and reset speaker and style."""
        self.model_name = model_name
        self.speaker_name = ""
        self.style_name = ""

    def choose_speaker(self, value: str) -> tuple[bool, str]:
        """Apply a "model||speaker" choice; return (model changed, previous model)."""
        model_name, speaker_name = parse_choice(value)
        before = self.model_name
        self.model_name = model_name
        self.speaker_name = speaker_name
        self.style_name = ""
        return before != model_name, before

    def choose_style(self, value: str) -> tuple[bool, str]:
        """Apply a "model||style" choice; return (model changed, previous model)."""
        model_name, style_name = parse_choice(value)
        before = self.model_name
        self.model_name = model_name
        self.style_name = style_name
        return before != model_name, before