from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    registry_path: str | None = None  # None: built-in preset scale
    mode: str = "modern"  # "modern", "legacy" or "both"
    output: str | None = None  # None: stdout
    output_dir: str = "."
    legacy_filename: str = "legacy.css"
    modern_filename: str = "modern.css"
