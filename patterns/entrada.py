"""
patterns/entrada.py

Leitura dos vetores de entrada (M1, M2, M3) e do texto colado
"""

import re
from typing import List, Sequence, Tuple

from patterns.frequencia import DataSet
from utils.constants import TOTAL_PREMIOS, INDICE_CENTENA
from utils.helpers import linha_para_digitos, tamanho_linha


def linha_valida(linha: str, idx: int) -> bool:
    """Linhas 0-5: exatamente 4 dígitos. Linha 6: exatamente 3 dígitos."""
    if not linha:
        return False
    if idx <= INDICE_CENTENA:
        return re.fullmatch(r"[0-9]{%d}" % tamanho_linha(idx), linha) is not None
    return True


def vetor_para_dataset(vetor: Sequence[str]) -> DataSet:
    return [linha_para_digitos(linha) for linha in vetor]


def parse_modules(vetores: Sequence[Sequence[str]]) -> Tuple[List[DataSet], List[str]]:
    """
    Converte os vetores de texto em DataSets

    Vetores inválidos geram uma mensagem de diagnóstico mas continuam
    sendo convertidos; a geração não é bloqueada.

    Returns:
        (modules, errors)
    """
    modules: List[DataSet] = []
    errors: List[str] = []

    for mod_index, vetor in enumerate(vetores):
        if not all(linha_valida(linha, idx) for idx, linha in enumerate(vetor)):
            errors.append(f"Vetor {mod_index + 1} instável.")
        modules.append(vetor_para_dataset(vetor))

    return modules, errors


def parse_paste_text(texto: str, atuais: Sequence[str]) -> List[str]:
    """
    Interpreta um bloco colado: uma linha por prêmio

    Espaços são removidos, linhas em branco descartadas e no máximo 7 linhas
    usadas. Linhas que faltarem mantêm o valor atual.

    Exemplo:
        parse_paste_text("1234\\n 56 78 \\n", [""] * 7) -> ["1234", "5678", "", "", "", "", ""]
    """
    linhas = [re.sub(r"\s", "", l) for l in re.split(r"\r?\n", texto or "")]
    linhas = [l for l in linhas if l][:TOTAL_PREMIOS]

    novos: List[str] = []
    for i in range(TOTAL_PREMIOS):
        if i < len(linhas):
            novos.append(linhas[i][:tamanho_linha(i)])
        else:
            novos.append(atuais[i] if i < len(atuais) and atuais[i] else "")
    return novos
