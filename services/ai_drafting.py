# services/ai_drafting.py

"""
Notice drafting through the Google Generative Language REST API.

draft_notice_content never raises: every failure comes back as one of the
fixed Portuguese strings below, which the caller shows as-is.
"""

import requests

from core.config import settings
from core.logging_config import logger


MISSING_KEY_MESSAGE = "Erro: Chave de API não configurada."
EMPTY_RESPONSE_MESSAGE = "Não foi possível gerar o texto."
CONNECTION_ERROR_MESSAGE = "Erro ao conectar com a IA. Tente novamente."

PROMPT_TEMPLATE = (
    "Escreva um comunicado de condomínio curto, profissional e claro sobre o seguinte tópico: "
    "\"{topic}\". O tom deve ser: {tone}. Retorne apenas o texto do corpo do comunicado, "
    "sem cabeçalhos markdown."
)


def build_prompt(topic: str, tone: str) -> str:
    return PROMPT_TEMPLATE.format(topic=topic, tone=tone)


def _extract_text(payload: dict) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts).strip()


# -----------------------------------------------------
# ✍️ Draft notice body
# -----------------------------------------------------
def draft_notice_content(topic: str, tone: str) -> str:
    api_key = settings.GEMINI_API_KEY
    if not api_key:
        logger.warning("GEMINI_API_KEY missing: AI drafting disabled.")
        return MISSING_KEY_MESSAGE

    url = f"{settings.GEMINI_API_URL.rstrip('/')}/models/{settings.GEMINI_MODEL}:generateContent"
    body = {"contents": [{"parts": [{"text": build_prompt(topic, tone)}]}]}

    try:
        response = requests.post(
            url,
            params={"key": api_key},
            json=body,
            timeout=settings.AI_REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        text = _extract_text(response.json())
    except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
        logger.error(f"Error generating notice: {e}")
        return CONNECTION_ERROR_MESSAGE

    if not text:
        return EMPTY_RESPONSE_MESSAGE

    logger.info(f"AI draft generated for topic '{topic}' ({len(text)} chars)")
    return text
