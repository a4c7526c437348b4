"""Localized prompt templates stored as data.

Public API:
    get_templates() — pure lookup keyed by (category, language).
"""

from .catalog import PromptTemplates, get_templates

__all__ = ["PromptTemplates", "get_templates"]
