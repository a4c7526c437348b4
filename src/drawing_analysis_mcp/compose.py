"""Prompt composition — turns a validated request into Gemini content parts.

The composer only selects and fills templates from the catalog; all
localized wording lives under ``prompts/``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from google.genai import types

from .models.request import AnalysisRequest, ImageInput
from .profiles import PipelineProfile
from .prompts import PromptTemplates, get_templates, shared


@dataclass
class ComposedPrompt:
    """System instruction plus ordered user parts for one model call."""

    system_instruction: str
    parts: list[types.Part]
    profile: PipelineProfile
    image_ids: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """All text parts joined, in call order (images omitted)."""
        return "\n".join(p.text for p in self.parts if p.text)

    @property
    def image_count(self) -> int:
        return sum(1 for p in self.parts if p.inline_data is not None)


def _context_block(request: AnalysisRequest, language: str) -> str:
    lines: list[str] = []
    if request.child_age is None:
        lines.append(shared.UNKNOWN_AGE[language])
    else:
        lines.append(shared.AGE_LINE[language].format(age=request.child_age))
    if request.child_gender:
        lines.append(shared.GENDER_LINE[language][request.child_gender])
    lines.append(shared.ROLE_NOTES[language][request.user_role])
    if request.cultural_context and request.cultural_context.strip():
        lines.append(shared.CULTURAL_CONTEXT_LINE[language].format(
            context=request.cultural_context.strip(),
        ))
    if request.features_json:
        lines.append(shared.FEATURES_LINE[language].format(
            features=shared.format_features(request.features_json),
        ))
    return "\n".join(lines)


def _age_calibration(request: AnalysisRequest, language: str) -> str:
    bands = shared.AGE_BANDS[language]
    lines = [shared.AGE_CALIBRATION_HEADER[language]]
    lines.extend(f"- {bands[key]}" for key in shared.AGE_BAND_KEYS)
    band = shared.age_band(request.child_age)
    if band is None:
        lines.append(shared.UNKNOWN_AGE[language])
    else:
        lines.append(shared.CURRENT_BAND_LINE[language].format(band=band))
    return "\n".join(lines)


def _image_block(images: list[ImageInput], language: str) -> str:
    if not images:
        return shared.NO_IMAGE_NOTE[language]
    if len(images) == 1:
        return shared.SINGLE_IMAGE_NOTE[language]
    lines = [shared.MULTI_IMAGE_HEADER[language].format(count=len(images))]
    lines.extend(
        shared.MULTI_IMAGE_ITEM[language].format(index=i, label=img.label, id=img.id)
        for i, img in enumerate(images, start=1)
    )
    lines.append(shared.MULTI_IMAGE_INSTRUCTIONS[language])
    return "\n".join(lines)


def _task_text(request: AnalysisRequest, templates: PromptTemplates) -> str:
    language = templates.language
    context = _context_block(request, language)
    if templates.category == "free_drawing":
        return templates.task.format(context=context)
    instrument = request.instrument
    return templates.task.format(
        test_name=templates.test_names.get(instrument, request.task_type),
        context=context,
        lens=templates.lenses.get(instrument, ""),
        taxonomy=templates.taxonomy,
    )


def compose_prompt(request: AnalysisRequest, profile: PipelineProfile) -> ComposedPrompt:
    """Build the system instruction and user parts for *request*.

    Part order: the task text block, then for each image an optional
    labeled marker (only when more than one image is present) followed
    by the inline image bytes.
    """
    language = request.language
    templates = get_templates(request.category, language)
    default_label = shared.DEFAULT_IMAGE_LABEL[language]
    images = [
        img if img.label else img.model_copy(update={"label": default_label})
        for img in request.effective_images(default_label)
    ]

    sections = [
        _task_text(request, templates),
        _age_calibration(request, language),
        _image_block(images, language),
        f"{templates.output_instructions}\n{templates.output_shape}",
    ]
    parts: list[types.Part] = [types.Part(text="\n\n".join(sections))]

    total = len(images)
    for index, image in enumerate(images, start=1):
        if total > 1:
            parts.append(types.Part(text=shared.IMAGE_MARKER[language].format(
                index=index, total=total, label=image.label, id=image.id,
            )))
        data, mime_type = image.decode()
        parts.append(types.Part.from_bytes(data=data, mime_type=mime_type))

    return ComposedPrompt(
        system_instruction=templates.system,
        parts=parts,
        profile=profile,
        image_ids=[img.id for img in images],
    )
