from stratum.emitter.emitter import emit_legacy, emit_modern

__all__ = ["emit_legacy", "emit_modern"]
