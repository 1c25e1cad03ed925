from __future__ import annotations

import codecs
from dataclasses import dataclass
import os


DEFAULT_ENCODING = "utf8"

# renderer encoding names without a same-named Python codec
_CODEC_NAMES = {
    "default": "utf-8",
    "koi8r": "koi8_r",
    "koi8u": "koi8_u",
}


def script_codec(encoding: str) -> str:
    name = _CODEC_NAMES.get(encoding, encoding)
    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise ValueError(f"unsupported script encoding: {encoding!r}") from exc


@dataclass(frozen=True)
class ScriptConfig:
    terminal: str | None = None
    encoding: str = DEFAULT_ENCODING
    enhanced_text: bool = True

    def __post_init__(self) -> None:
        script_codec(self.encoding)

    @property
    def codec(self) -> str:
        return script_codec(self.encoding)

    @classmethod
    def from_env(
        cls,
        *,
        terminal_env_var: str = "PLOTSCRIPT_TERMINAL",
        encoding_env_var: str = "PLOTSCRIPT_ENCODING",
        enhanced_env_var: str = "PLOTSCRIPT_ENHANCED",
        enhanced_default: str = "1",
    ) -> "ScriptConfig":
        terminal = os.getenv(terminal_env_var, "").strip() or None
        encoding = os.getenv(encoding_env_var, DEFAULT_ENCODING).strip()
        if not encoding:
            raise ValueError(f"{encoding_env_var} must not be empty")
        raw_enhanced = os.getenv(enhanced_env_var, enhanced_default).strip()
        if raw_enhanced not in {"0", "1"}:
            raise ValueError(f"{enhanced_env_var} must be '0' or '1', got {raw_enhanced!r}")
        return cls(terminal=terminal, encoding=encoding, enhanced_text=raw_enhanced == "1")
