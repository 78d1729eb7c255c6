from stratum.config.loader import build_registry, load_fragments, load_registry, parse_fragments
from stratum.config.settings import CompilerConfig

__all__ = [
    "CompilerConfig",
    "build_registry",
    "load_registry",
    "parse_fragments",
    "load_fragments",
]
