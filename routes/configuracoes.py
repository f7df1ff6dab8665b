"""
Rota de configurações do usuário (entropia e voz)
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field
from typing import Dict, Optional

from core.painel import atualizar_settings
from helpers.estado import carregar_estado, aplicar_operacao

router = APIRouter()


class SettingsIn(BaseModel):
    entropy: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    voice_enabled: Optional[bool] = None


@router.get("")
async def get_configuracoes(request: Request) -> Dict:
    estado = await carregar_estado(request)
    return dict(estado.settings)


@router.put("")
async def put_configuracoes(request: Request, body: SettingsIn) -> Dict:
    """Atualiza entropia (0..1) e/ou voz"""
    estado = await carregar_estado(request)
    op = atualizar_settings(estado, entropy=body.entropy, voice_enabled=body.voice_enabled)
    return await aplicar_operacao(request, estado, op)
