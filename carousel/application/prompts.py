"""
Prompt templates for carousel text and image generation.

The text prompt pins the exact JSON contract the normalizer expects. Models do
not always obey the "no markdown" rule, so the normalizer still tolerates
code fences.
"""

from langchain_core.prompts import PromptTemplate

from carousel.domain.models import GenerationRequest, SlideDraft

IMAGE_STYLE_QUALIFIERS = "cinematic, premium, editorial lighting"
IMAGE_NEGATIVE_CONSTRAINTS = "no text, no letters, no logos, no watermark"

_IMAGE_PROMPT_RULE = (
    '- Cada slide deve ter também "imagePrompt": uma descrição visual em INGLÊS '
    "(1 a 2 frases) de uma imagem que ilustre o slide, sem pedir texto na imagem\n"
)

_SLIDE_EXAMPLE = '{{ "title": "Título do Slide {n}", "body": "Texto descritivo do slide {n}." }}'
_SLIDE_EXAMPLE_WITH_IMAGE = (
    '{{ "title": "Título do Slide {n}", "body": "Texto descritivo do slide {n}.", '
    '"imagePrompt": "Visual description of slide {n} in English." }}'
)

CAROUSEL_PROMPT = PromptTemplate.from_template(
    "Você é um estrategista de conteúdo especialista em criar carrosséis virais para Instagram.\n"
    "Gere um carrossel com exatamente {slide_count} slides sobre o seguinte tema:\n"
    "\n"
    "TEMA: {topic}\n"
    "\n"
    "REGRAS OBRIGATÓRIAS:\n"
    "- Responda APENAS com um JSON válido, sem texto antes ou depois, sem blocos de código markdown\n"
    '- Cada slide deve ter: "title" (título curto e impactante, máximo 6 palavras) e '
    '"body" (2 a 3 frases explicativas, conteúdo denso e valioso)\n'
    "{image_prompt_rule}"
    "- O primeiro slide deve ser um gancho forte que prenda a atenção\n"
    "- O último slide deve ter uma call-to-action clara (ex: seguir, salvar, comentar)\n"
    "- Tom: autoridade, direto, transformador\n"
    '- Idioma: Português Brasileiro para "title" e "body"\n'
    "\n"
    "FORMATO EXATO DE RESPOSTA (sem nenhum caractere fora deste JSON):\n"
    "{{\n"
    '  "slides": [\n'
    "    {first_example},\n"
    "    {second_example}\n"
    "  ]\n"
    "}}"
)


def build_prompt(request: GenerationRequest, include_image_prompt: bool = False) -> str:
    """Render the text-generation instruction for ``request``.

    ``include_image_prompt`` adds the English ``imagePrompt`` field to the
    contract; it is only requested when an image provider is configured.
    """
    example = _SLIDE_EXAMPLE_WITH_IMAGE if include_image_prompt else _SLIDE_EXAMPLE
    return CAROUSEL_PROMPT.format(
        topic=request.topic,
        slide_count=request.slide_count,
        image_prompt_rule=_IMAGE_PROMPT_RULE if include_image_prompt else "",
        first_example=example.format(n=1),
        second_example=example.format(n=2),
    ).strip()


def build_image_prompt(topic: str, draft: SlideDraft) -> str:
    """Prompt sent to the image provider for one slide.

    The slide's own ``image_prompt`` wins; otherwise one is composed from the
    topic and the slide text. Style and negative constraints are appended to
    every prompt so a carousel stays visually consistent.
    """
    if draft.image_prompt and draft.image_prompt.strip():
        subject = draft.image_prompt.strip().rstrip(".")
    else:
        fragments = [
            f"Illustration for a social media carousel about {topic}",
            f"slide theme: {draft.title}",
            f"context: {draft.body}",
        ]
        subject = ". ".join(fragment.strip().rstrip(".") for fragment in fragments)
    return f"{subject}. {IMAGE_STYLE_QUALIFIERS}. {IMAGE_NEGATIVE_CONSTRAINTS}."
