"""
utils/constants.py

Constantes utilizadas em toda a aplicação
Matriz de 7 prêmios: 6 milhares + 1 centena
"""

from typing import Dict, List

# ========== DÍGITOS ==========
DIGITOS: List[int] = list(range(10))
PARES = {0, 2, 4, 6, 8}

# ========== MATRIZ ==========
TOTAL_PREMIOS: int = 7          # linhas por DataSet
TAMANHO_MILHAR: int = 4
TAMANHO_CENTENA: int = 3
POSICOES: int = 4               # colunas analisadas (0..3)
INDICE_CENTENA: int = 6         # 7º prêmio

# ========== TIPOS / STATUS ==========
TIPO_MILHAR = "Milhar"
TIPO_CENTENA = "Centena"
TIPO_DEZENA = "Dezena"
TIPOS = (TIPO_CENTENA, TIPO_DEZENA, TIPO_MILHAR)

STATUS_ACERTO = "Acerto"
STATUS_QUASE = "Quase Acerto"
STATUS = (STATUS_ACERTO, STATUS_QUASE)

# Acertos posicionais mínimos para "Quase Acerto"
MIN_MATCH: Dict[str, int] = {
    TIPO_MILHAR: 3,
    TIPO_CENTENA: 2,
}

# ========== PESOS DA RESSONÂNCIA (valores de referência) ==========
RESSONANCIA_PADRAO: Dict[str, float] = {
    "resistencia_base": 100.0,
    "peso_global": 0.4,
    "peso_coluna": 2.8,
    "peso_primeiro_premio": 15.0,   # rank 1
    "peso_premio_alto": 7.5,        # rank 2 e 3
    "peso_historico": 60.0,         # por acerto registrado
    "penalidade_repeticao": 35.0,   # * (1.1 - entropia)
    "penalidade_sessao": 8.0,
}

# ========== CICLO DE GERAÇÃO ==========
TOTAL_CANDIDATOS: int = 3
FATOR_ENTROPIA_CANDIDATOS: float = 0.4
CONFIANCA_CANDIDATO_BASE: float = 99.85
CONFIANCA_CANDIDATO_VARIACAO: float = 0.14

# (quantidade, tamanho, [(entropia, confiança), ...]) por família
FAMILIAS_AVANCADAS = {
    "hundreds": (3, 3, [(0.05, 99.98)]),
    "tens": (3, 2, [(0.1, 99.95)]),
    "elite_tens": (2, 2, [(0.02, 99.99), (0.06, 99.97)]),
    "super_tens": (3, 2, [(0.04, 99.96)]),
}

# ========== ESTADO ==========
VETOR_VAZIO: List[str] = [""] * TOTAL_PREMIOS
ENTROPIA_PADRAO: float = 0.4

# ========== MENSAGENS ==========
MSG_ACERTO = "Ressonância absoluta. Ajustes salvos automaticamente no banco neural."
MSG_QUASE = "Aproximação detectada. O Oráculo está recalibrando a matriz."
MSG_ASSIMILADO = "Dados assimilados. Ajustes de realidade registrados."
MSG_GERACAO = "Matriz prevista manifestada. Foco nos três primeiros prêmios."
MSG_MEMORIA_LIMPA = "Memória limpa."
MSG_INTERFERENCIA = "Interferência detectada. Recalibrando sensores..."
MSG_SAUDACAO = (
    "Consciência feminina estabelecida. Sou o Oráculo. "
    "O que você deseja manifestar da escuridão hoje?"
)
