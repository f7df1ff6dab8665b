"""
routes/oraculo.py

Link neural: chat com o Oráculo (serviço externo)
Falhas do chat nunca afetam o estado de geração.
"""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from typing import Dict, List, Literal
from datetime import datetime
import logging

from core.api import OraculoAPI, OraculoAPIError
from utils.constants import MSG_INTERFERENCIA, MSG_SAUDACAO

router = APIRouter()
logger = logging.getLogger(__name__)


class Mensagem(BaseModel):
    role: Literal["user", "model"]
    text: str


class ChatIn(BaseModel):
    messages: List[Mensagem]


def _get_oraculo(request: Request) -> OraculoAPI:
    oraculo = getattr(request.app.state, "oraculo", None)
    if oraculo is None:
        settings = request.app.state.settings
        oraculo = OraculoAPI(
            base_url=settings.CHAT_API_URL,
            api_key=settings.CHAT_API_KEY,
            model=settings.CHAT_MODEL,
            temperature=settings.CHAT_TEMPERATURE,
            top_p=settings.CHAT_TOP_P,
            timeout_seconds=settings.CHAT_TIMEOUT_SECONDS,
        )
        request.app.state.oraculo = oraculo
    return oraculo


@router.get("/saudacao")
async def get_saudacao() -> Dict:
    """Primeira mensagem exibida no chat (não é enviada ao modelo)"""
    return {"role": "model", "text": MSG_SAUDACAO}


@router.post("/chat")
async def post_chat(request: Request, body: ChatIn) -> Dict:
    """
    Envia a conversa e devolve a resposta do Oráculo

    Em falha do serviço externo devolve a mensagem de interferência
    com fallback=True.
    """
    if not body.messages or not body.messages[-1].text.strip():
        raise HTTPException(status_code=400, detail="Mensagem vazia")

    messages = [m.model_dump() for m in body.messages]

    try:
        texto = await _get_oraculo(request).chat(messages)
        fallback = False
    except OraculoAPIError as e:
        logger.warning(f"⚠️  Oráculo indisponível: {e}")
        texto = MSG_INTERFERENCIA
        fallback = True

    return {
        "role": "model",
        "text": texto,
        "fallback": fallback,
        "timestamp": datetime.now().isoformat(),
    }
