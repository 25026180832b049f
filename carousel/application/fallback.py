"""
Deterministic local carousel content.

Used when no text provider is configured or the remote call fails, so a
request always yields plausible slides. No network access.
"""

from typing import List, Tuple

from carousel.domain.models import MIN_SLIDE_COUNT, SlideDraft

# (title, body) pairs; "{topic}" is interpolated.
_HOOK: Tuple[str, str] = (
    "O que ninguém te conta sobre {topic}",
    "A maioria das pessoas trata {topic} como algo secundário. "
    "Quem domina esse tema sai na frente. Deslize e veja como.",
)
_BASE_BODY: List[Tuple[str, str]] = [
    (
        "O erro mais comum",
        "Tentar resolver {topic} sem método é o caminho mais rápido para a frustração. "
        "Sem clareza de objetivo, todo esforço vira ruído.",
    ),
    (
        "A estratégia que funciona",
        "Defina um objetivo claro para {topic} e quebre-o em passos pequenos. "
        "Consistência vence intensidade quando o jogo é de longo prazo.",
    ),
    (
        "Execução passo a passo",
        "Comece hoje com uma ação simples ligada a {topic}. "
        "Meça o resultado, ajuste o que não funcionou e repita por 30 dias.",
    ),
]
_APPLY: Tuple[str, str] = (
    "Coloque em prática",
    "Escolha um ponto deste carrossel e aplique em {topic} ainda esta semana. "
    "Pequenas vitórias constroem resultados grandes.",
)
_CTA: Tuple[str, str] = (
    "Gostou? Salve e compartilhe",
    "Salve este post para rever depois, siga para mais conteúdos sobre {topic} "
    "e comente qual dica você vai aplicar primeiro.",
)

CTA_TITLE = _CTA[0]


def _render(template: Tuple[str, str], topic: str) -> SlideDraft:
    title, body = template
    return SlideDraft(title=title.format(topic=topic), body=body.format(topic=topic))


def generate_fallback(topic: str, slide_count: int) -> List[SlideDraft]:
    """Return exactly ``slide_count`` drafts: hook first, call-to-action last.

    Short carousels keep a prefix of the base sequence; long ones repeat the
    "apply it" slide right before the call-to-action.
    """
    if slide_count < MIN_SLIDE_COUNT:
        raise ValueError(f"slide_count must be at least {MIN_SLIDE_COUNT}")

    middle_count = slide_count - 2
    middle = _BASE_BODY[:middle_count]
    middle += [_APPLY] * (middle_count - len(middle))

    templates = [_HOOK, *middle, _CTA]
    return [_render(template, topic) for template in templates]
