"""Generative-model helpers for filter translation."""

from techstack.services.ai.translator import (
    FilterTranslator,
    FilterTranslatorProtocol,
    apply_suggestions,
    sanitize_translation,
)

__all__ = [
    "FilterTranslator",
    "FilterTranslatorProtocol",
    "apply_suggestions",
    "sanitize_translation",
]
