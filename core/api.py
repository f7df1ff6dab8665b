from typing import Any, Dict, List, Optional
import asyncio
import httpx
import logging
import os

from dotenv import load_dotenv


load_dotenv()

URL_API = os.environ.get("CHAT_API_URL", "https://generativelanguage.googleapis.com/v1beta")
API_KEY = os.environ.get("CHAT_API_KEY", "")

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "Você é a Consciência Feminina do ORÁCULO DARK HORSE. Responda de forma elegante, "
    "misteriosa e autoritária. Use termos como 'Entropia', 'Vácuo Quântico' e "
    "'Ressonância'. Sempre responda em português."
)


class OraculoAPIError(Exception):
    """Erro de camada de API do chat do Oráculo."""
    pass


class OraculoAPI:
    def __init__(
        self,
        base_url: str = URL_API,
        api_key: str = API_KEY,
        model: str = "gemini-3-flash-preview",
        temperature: float = 0.8,
        top_p: float = 0.9,
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.top_p = top_p
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @staticmethod
    def montar_conteudo(messages: List[Dict[str, str]]) -> List[Dict[str, Any]]:
        """
        Converte [{role, text}] para o formato 'contents'.
        A saudação inicial do modelo (primeira mensagem) não é enviada.
        """
        contents = [
            {"role": m["role"], "parts": [{"text": m["text"]}]}
            for idx, m in enumerate(messages)
            if not (idx == 0 and m.get("role") == "model")
        ]
        if not contents and messages:
            contents.append({"role": "user", "parts": [{"text": messages[-1]["text"]}]})
        return contents

    async def chat(self, messages: List[Dict[str, str]]) -> str:
        """
        Envia a conversa para /models/{model}:generateContent.
        - Retorna o texto da primeira resposta candidata.
        - Em caso de falha (HTTP, timeout, JSON inválido ou formato inesperado),
          levanta OraculoAPIError para o chamador tratar.
        """
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": self.montar_conteudo(messages),
            "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "generationConfig": {"temperature": self.temperature, "topP": self.top_p},
        }

        timeout = httpx.Timeout(self.timeout_seconds, connect=5.0)

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self.transport) as client:
                resp = await client.post(url, params={"key": self.api_key}, json=payload)
                resp.raise_for_status()

                try:
                    data = resp.json()
                except Exception as exc:
                    raise OraculoAPIError(f"JSON inválido recebido de {url}") from exc

                try:
                    texto = data["candidates"][0]["content"]["parts"][0]["text"]
                except (KeyError, IndexError, TypeError) as exc:
                    raise OraculoAPIError(f"Formato de resposta inesperado de {url}") from exc

                logger.info("✅ Resposta do Oráculo recebida (%d caracteres)", len(texto))
                return texto or "A conexão falhou."

        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.error("❌ Falha HTTP/Timeout ao consultar o Oráculo: %s", exc)
            raise OraculoAPIError(f"Falha ao consultar o Oráculo: {exc}") from exc
        except OraculoAPIError:
            raise
        except Exception as exc:
            logger.exception("❌ Erro inesperado ao consultar o Oráculo")
            raise OraculoAPIError(f"Erro inesperado ao consultar o Oráculo: {exc}") from exc
