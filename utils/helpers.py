"""
utils/helpers.py

Funções auxiliares utilizadas pelo motor e pelo painel
"""

from typing import List

from utils.constants import (
    PARES,
    TAMANHO_CENTENA,
    TAMANHO_MILHAR,
    INDICE_CENTENA,
)


def is_par(digito: int) -> bool:
    """Retorna True se o dígito for par"""
    return digito in PARES


def tamanho_linha(indice: int) -> int:
    """
    Tamanho esperado de uma linha da matriz

    Exemplo:
        tamanho_linha(0) -> 4
        tamanho_linha(6) -> 3
    """
    return TAMANHO_CENTENA if indice == INDICE_CENTENA else TAMANHO_MILHAR


def linha_para_digitos(linha: str) -> List[int]:
    """
    Converte uma linha digitada em lista de dígitos.

    Caracteres que não são dígitos são descartados, então uma linha vazia
    ou sem nenhum dígito vira uma linha vazia.

    Exemplo:
        linha_para_digitos("1234") -> [1, 2, 3, 4]
        linha_para_digitos("12a4") -> [1, 2, 4]
    """
    return [int(c) for c in (linha or "") if c in "0123456789"]


def digitos_para_str(linha: List[int]) -> str:
    """[1, 2, 3, 4] -> "1234" """
    return "".join(str(d) for d in linha)


def sanitizar_entrada(valor: str, indice: int) -> str:
    """Mantém apenas dígitos e corta no tamanho da linha"""
    numerico = "".join(c for c in (valor or "") if c in "0123456789")
    return numerico[:tamanho_linha(indice)]


def rotulo_premio(posicao: int) -> str:
    """posicao 1-based -> '1º PRÊMIO'"""
    return f"{posicao}º PRÊMIO"
