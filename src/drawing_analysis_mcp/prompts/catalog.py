"""Template catalog keyed by (category, language)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..types import SUPPORTED_LANGUAGES, TaskCategory
from . import free_drawing, instruments, notices, shared


@dataclass(frozen=True)
class PromptTemplates:
    """Every text block the composer needs for one category and language."""

    category: TaskCategory
    language: str
    system: str
    task: str
    output_shape: str
    output_instructions: str
    disclaimer: str
    lenses: Mapping[str, str] = field(default_factory=dict)
    test_names: Mapping[str, str] = field(default_factory=dict)
    taxonomy: str = ""


def _build(category: TaskCategory, language: str) -> PromptTemplates:
    name = shared.LANGUAGE_NAMES[language]
    if category == "free_drawing":
        return PromptTemplates(
            category=category,
            language=language,
            system=free_drawing.SYSTEM[language].format(language_name=name),
            task=free_drawing.TASK[language],
            output_shape=shared.FREE_DRAWING_OUTPUT_SHAPE,
            output_instructions=shared.OUTPUT_INSTRUCTIONS[language].format(language_name=name),
            disclaimer=notices.DISCLAIMERS[language],
        )
    return PromptTemplates(
        category=category,
        language=language,
        system=instruments.SYSTEM[language].format(language_name=name),
        task=instruments.TASK[language],
        output_shape=shared.INSTRUMENT_OUTPUT_SHAPE,
        output_instructions=shared.OUTPUT_INSTRUCTIONS[language].format(language_name=name),
        disclaimer=notices.DISCLAIMERS[language],
        lenses=instruments.LENSES[language],
        test_names=instruments.TEST_NAMES[language],
        taxonomy=instruments.render_taxonomy(language),
    )


_CATALOG: dict[tuple[str, str], PromptTemplates] = {
    (category, language): _build(category, language)
    for category in ("free_drawing", "instrument")
    for language in SUPPORTED_LANGUAGES
}


def get_templates(category: TaskCategory, language: str) -> PromptTemplates:
    """Look up the templates for *category* in *language*.

    Raises:
        KeyError: If the pair is not in the catalog.
    """
    try:
        return _CATALOG[(category, language)]
    except KeyError:
        raise KeyError(f"No prompt templates for category={category!r}, language={language!r}") from None
