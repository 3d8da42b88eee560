from .variation_locator import VariationLocator, parse_marker_name, variation_marker, variation_panel

__all__ = ['VariationLocator', 'parse_marker_name', 'variation_marker', 'variation_panel']
