from profile_css.engine.cssutils_adapter import CssutilsMinifier

__all__ = ["CssutilsMinifier"]
