"""Model, speaker and style information reported by the speech API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class ModelInfoError(Exception):
    """Raised when model information is missing or malformed."""


@dataclass
class ModelInfo:
    """Information about a single model."""

    model_id: int
    model_name: str
    spk2id: dict[str, int] = field(default_factory=dict)
    id2spk: dict[int, str] = field(default_factory=dict)
    style2id: dict[str, int] = field(default_factory=dict)
    id2style: dict[int, str] = field(default_factory=dict)


@dataclass
class ValidModel:
    """A model, speaker and style that exist in the model information."""

    model_name: str
    speaker_name: str
    style_name: str
    model_id: int
    speaker_id: int


@dataclass
class Sbv2ModelInfo:
    """Every model the API offers, by name and by id."""

    name_to_model: dict[str, ModelInfo] = field(default_factory=dict)
    id_to_model: dict[int, ModelInfo] = field(default_factory=dict)

    def get_valid_model(
        self, model_name: str, speaker_name: str, style_name: str, default_model: str
    ) -> ValidModel:
        """Resolve the requested names, falling back to defaults and id 0."""
        model = self.name_to_model.get(model_name) or self.name_to_model.get(default_model)
        if model is None:
            model = self.id_to_model.get(0)
        if model is None:
            raise ModelInfoError("no model is available")

        speaker_id = model.spk2id.get(speaker_name, 0)
        style_id = model.style2id.get(style_name, 0)
        try:
            valid_speaker = model.id2spk[speaker_id]
            valid_style = model.id2style[style_id]
        except KeyError as exc:
            raise ModelInfoError(f"model {model.model_name!r} lacks id {exc}") from None

        return ValidModel(
            model_name=model.model_name,
            speaker_name=valid_speaker,
            style_name=valid_style,
            model_id=model.model_id,
            speaker_id=speaker_id,
        )


def _parse_id_map(obj: Any, key: str) -> dict[str, int]:
    value = obj.get(key)
    if not isinstance(value, Mapping):
        raise ModelInfoError(f"{key} is missing")
    result: dict[str, int] = {}
    for name, ident in value.items():
        if isinstance(ident, bool) or not isinstance(ident, int) or ident < 0:
            raise ModelInfoError(f"{key} has an invalid id for {name!r}")
        result[name] = ident
    return result


def _folder_name(config_path: Any) -> str:
    text = json.dumps(config_path, ensure_ascii=False)
    separator = "\\\\" if "\\\\" in text else "/"
    parts = text.split(separator)
    if len(parts) < 2:
        raise ModelInfoError(f"cannot find the model folder in {text}")
    return parts[1]


def parse_modelinfo(data: str | Mapping[str, Any]) -> Sbv2ModelInfo:
    """Build model information from the API's JSON (text or decoded object)."""
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ModelInfoError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ModelInfoError("model information must be a JSON object")

    info = Sbv2ModelInfo()
    for model_key, model_obj in data.items():
        try:
            model_id = int(model_key)
        except ValueError:
            raise ModelInfoError(f"invalid model id {model_key!r}") from None
        if model_id < 0:
            raise ModelInfoError(f"invalid model id {model_key!r}")
        if not isinstance(model_obj, Mapping):
            raise ModelInfoError(f"model {model_key} is not an object")

        folder_name = _folder_name(model_obj.get("config_path"))
        spk2id = _parse_id_map(model_obj, "spk2id")
        style2id = _parse_id_map(model_obj, "style2id")

        model = ModelInfo(
            model_id=model_id,
            model_name=folder_name,
            spk2id=spk2id,
            id2spk={v: k for k, v in spk2id.items()},
            style2id=style2id,
            id2style={v: k for k, v in style2id.items()},
        )
        info.name_to_model[folder_name] = model
        info.id_to_model[model_id] = model
    return info