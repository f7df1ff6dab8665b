"""
main.py - Aplicação Principal da API Oráculo Dark Horse

Arquitetura:
    - Motor de geração isolado em patterns/ (sem I/O)
    - Estado persistido no Redis, lido como snapshot e gravado por mutações
    - Configurações centralizadas
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
import logging
import sys
from datetime import datetime

# Importar configurações
from config.settings import Settings
from config.database import StoreManager
from core.store import EstadoStore

# Importar rotas
from routes import geracao, modulos, historico, configuracoes, oraculo, health

# Importar middleware customizado
from middleware.logging_middleware import LoggingMiddleware
from middleware.error_handler import error_handler_middleware

logger = logging.getLogger(__name__)


def configurar_logging(settings: Settings) -> None:
    """Configuração de logging (stdout + arquivo)"""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def create_app(settings: Optional[Settings] = None, store: Optional[EstadoStore] = None) -> FastAPI:
    """
    Monta a aplicação

    Args:
        settings: Configurações (padrão: lidas do ambiente/.env)
        store: EstadoStore pronto; quando informado o Redis não é conectado
    """
    settings = settings or Settings()
    store_manager = StoreManager(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        """
        Gerencia o ciclo de vida da aplicação
        - Startup: Conecta ao Redis
        - Shutdown: Fecha conexões
        """
        logger.info(f"🚀 Iniciando {settings.APP_NAME} {settings.APP_VERSION} ({settings.ENVIRONMENT})")

        app.state.settings = settings

        if store is not None:
            app.state.store = store
        else:
            try:
                await store_manager.connect()
                if not await store_manager.ping():
                    raise ConnectionError("Não foi possível conectar ao Redis")
                app.state.store = EstadoStore(
                    store_manager.get_client(),
                    prefix=settings.REDIS_KEY_PREFIX,
                    default_settings={
                        "entropy": settings.DEFAULT_ENTROPY,
                        "voice_enabled": settings.DEFAULT_VOICE_ENABLED,
                    },
                )
                logger.info("✅ Redis conectado com sucesso")
            except Exception as e:
                logger.error(f"❌ Erro ao iniciar aplicação: {e}")
                raise

        yield

        logger.info("🔄 Encerrando aplicação...")
        if store is None:
            try:
                await store_manager.disconnect()
            except Exception as e:
                logger.error(f"❌ Erro ao desconectar Redis: {e}")
        logger.info("👋 Aplicação encerrada")

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
    API do Oráculo Dark Horse: geração heurística de milhares, centenas e dezenas.

    ## Módulos:
    - **FREQUÊNCIA**: tabelas por dígito, coluna e 1º prêmio
    - **RESSONÂNCIA**: resistência por dígito com peso de acertos
    - **CICLO**: matriz 1º-7º, tríade elite e predições avançadas
    - **RETIFICAÇÃO**: auto-correção contra o resultado real

    Sem qualquer garantia estatística ou preditiva.
    """,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    )
    app.state.settings = settings

    # ========== CORS ==========
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========== MIDDLEWARE CUSTOMIZADO ==========
    app.add_middleware(LoggingMiddleware)
    app.middleware("http")(error_handler_middleware)

    # ========== ROTAS ==========
    app.include_router(geracao.router, prefix="/api/geracao", tags=["Geração"])
    app.include_router(modulos.router, prefix="/api/modulos", tags=["Módulos"])
    app.include_router(historico.router, prefix="/api/historico", tags=["Histórico"])
    app.include_router(configuracoes.router, prefix="/api/configuracoes", tags=["Configurações"])
    app.include_router(oraculo.router, prefix="/api/oraculo", tags=["Oráculo"])
    app.include_router(health.router, prefix="", tags=["Health"])

    @app.get("/", tags=["Root"])
    async def root():
        """
        Endpoint raiz - Informações da API
        """
        return {
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "online",
            "timestamp": datetime.now().isoformat(),
            "environment": settings.ENVIRONMENT,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "geracao": "/api/geracao",
                "modulos": "/api/modulos",
                "historico": "/api/historico/{entradas|acertos|retificacoes}",
                "configuracoes": "/api/configuracoes",
                "oraculo": "/api/oraculo/chat",
            },
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Tratador global de exceções
        """
        logger.error(f"❌ Erro não tratado: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "message": str(exc) if settings.ENVIRONMENT != "production" else "Erro interno do servidor",
                "timestamp": datetime.now().isoformat(),
            }
        )

    return app


settings = Settings()
configurar_logging(settings)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level="info",
    )
