from stratum.predicate.renderer import DPI_FEATURES, PredicateRenderer, render_predicate

__all__ = ["DPI_FEATURES", "PredicateRenderer", "render_predicate"]
