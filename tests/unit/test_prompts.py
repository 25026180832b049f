"""Unit tests for prompt construction."""

from carousel.application.prompts import (
    IMAGE_NEGATIVE_CONSTRAINTS,
    IMAGE_STYLE_QUALIFIERS,
    build_image_prompt,
    build_prompt,
)
from carousel.domain.models import GenerationRequest, SlideDraft


def test_prompt_embeds_topic_and_count():
    prompt = build_prompt(GenerationRequest(topic="produtividade", slide_count=7))

    assert "TEMA: produtividade" in prompt
    assert "exatamente 7 slides" in prompt


def test_prompt_pins_output_contract():
    prompt = build_prompt(GenerationRequest(topic="foco", slide_count=5))

    assert '"slides"' in prompt
    assert '"title"' in prompt and '"body"' in prompt
    assert "sem blocos de código markdown" in prompt
    assert "gancho" in prompt
    assert "call-to-action" in prompt
    assert "Português Brasileiro" in prompt
    assert "imagePrompt" not in prompt


def test_prompt_requests_english_image_prompt_when_asked():
    prompt = build_prompt(
        GenerationRequest(topic="foco", slide_count=5), include_image_prompt=True
    )

    assert '"imagePrompt"' in prompt
    assert "INGLÊS" in prompt


def test_prompt_is_deterministic():
    request = GenerationRequest(topic="foco", slide_count=4)

    assert build_prompt(request) == build_prompt(request)


def test_prompt_tolerates_braces_in_topic():
    prompt = build_prompt(GenerationRequest(topic="json {slides}", slide_count=3))

    assert "TEMA: json {slides}" in prompt


def test_image_prompt_prefers_slide_image_prompt():
    draft = SlideDraft(title="Foco", body="Texto.", image_prompt="A calm desk at dawn")

    prompt = build_image_prompt("produtividade", draft)

    assert prompt.startswith("A calm desk at dawn.")
    assert "Foco" not in prompt
    assert IMAGE_STYLE_QUALIFIERS in prompt
    assert IMAGE_NEGATIVE_CONSTRAINTS in prompt


def test_image_prompt_composed_from_slide_text_when_missing():
    draft = SlideDraft(title="Foco total", body="Elimine distrações.")

    prompt = build_image_prompt("produtividade", draft)

    assert "produtividade" in prompt
    assert "Foco total" in prompt
    assert "Elimine distrações" in prompt
    assert prompt.endswith(f"{IMAGE_STYLE_QUALIFIERS}. {IMAGE_NEGATIVE_CONSTRAINTS}.")
