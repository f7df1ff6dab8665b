# ========== utils/__init__.py ==========
"""
Utilitários do sistema
"""

from utils.constants import (
    DIGITOS,
    TIPO_MILHAR,
    TIPO_CENTENA,
    TIPO_DEZENA,
    STATUS_ACERTO,
    STATUS_QUASE,
)

from utils.helpers import (
    is_par,
    tamanho_linha,
    linha_para_digitos,
    digitos_para_str,
    sanitizar_entrada,
    rotulo_premio,
)

__all__ = [
    'DIGITOS',
    'TIPO_MILHAR',
    'TIPO_CENTENA',
    'TIPO_DEZENA',
    'STATUS_ACERTO',
    'STATUS_QUASE',
    'is_par',
    'tamanho_linha',
    'linha_para_digitos',
    'digitos_para_str',
    'sanitizar_entrada',
    'rotulo_premio',
]
