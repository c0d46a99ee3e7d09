"""
Variant plugin entrypoints.
"""

from variants.base import QUESTIONS_PER_INTERVIEW, BaseVariantPlugin, VariantPlugin, VariantUiConfig
from variants.registry import available_variants, load_variant

__all__ = [
    "QUESTIONS_PER_INTERVIEW",
    "BaseVariantPlugin",
    "VariantPlugin",
    "VariantUiConfig",
    "available_variants",
    "load_variant",
]
