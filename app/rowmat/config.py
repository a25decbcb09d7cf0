"""
Codec configuration.

Settings are read once from an optional JSON file (``$ROWMAT_CONFIG``) and
environment overrides, then cached. A missing or unreadable file means the
defaults apply, so the codec runs with no configuration at all.
"""
from __future__ import annotations
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator, model_validator

logger = logging.getLogger(__name__)

APP_VERSION = os.getenv("ROWMAT_APP_VERSION", "v0.1-core")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class CodecConfig(BaseModel):
    # end of input where a blank line is expected fails the stream
    strict_terminator: bool = True
    separator: str = " "
    horizontal_whitespace: str = " \t"
    default_element: str = "int"

    @field_validator("horizontal_whitespace")
    @classmethod
    def check_hws(cls, v: str) -> str:
        if not v:
            raise ValueError("horizontal_whitespace must not be empty")
        # tokens end at whitespace; "\r" reads as a line break with universal newlines
        if not v.isspace() or "\n" in v or "\r" in v:
            raise ValueError(f"horizontal_whitespace must be whitespace other than line breaks, got {v!r}")
        return v

    @field_validator("separator")
    @classmethod
    def check_separator(cls, v: str) -> str:
        if not v:
            raise ValueError("separator must not be empty")
        return v

    @field_validator("default_element")
    @classmethod
    def check_default_element(cls, v: str) -> str:
        from .elements import ELEMENTS
        if v not in ELEMENTS:
            raise ValueError(f"unknown element type '{v}'; known: {sorted(ELEMENTS)}")
        return v

    @model_validator(mode="after")
    def check_separator_is_skipped(self) -> "CodecConfig":
        # the reader must skip what the writer puts between elements
        if any(ch not in self.horizontal_whitespace for ch in self.separator):
            raise ValueError(
                f"separator {self.separator!r} must consist of horizontal_whitespace "
                f"characters {self.horizontal_whitespace!r}"
            )
        return self


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    strict = os.getenv("ROWMAT_STRICT_TERMINATOR")
    if strict is not None and strict.strip():
        s = strict.strip().lower()
        if s in _TRUE:
            out["strict_terminator"] = True
        elif s in _FALSE:
            out["strict_terminator"] = False
        else:
            # let pydantic report it
            out["strict_terminator"] = strict
    elem = os.getenv("ROWMAT_DEFAULT_ELEMENT")
    if elem and elem.strip():
        out["default_element"] = elem.strip()
    return out


def load_config(path: Optional[str] = None) -> CodecConfig:
    path = path or os.getenv("ROWMAT_CONFIG")
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if isinstance(raw, dict):
                data = raw
            else:
                logger.warning("Ignoring config %s: expected a JSON object", path)
        except (OSError, json.JSONDecodeError) as e:
            # no config = defaults
            logger.warning("Could not read config %s: %s", path, e)
    data = {**data, **_env_overrides()}
    return CodecConfig(**data)


_CONFIG: Optional[CodecConfig] = None


def get_config() -> CodecConfig:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


def reset_config() -> None:
    global _CONFIG
    _CONFIG = None
