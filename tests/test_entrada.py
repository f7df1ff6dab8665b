"""
tests/test_entrada.py

Vetores de entrada e texto colado
"""

from patterns.entrada import parse_modules, parse_paste_text

VALIDO = ["1234", "5678", "9012", "3456", "7890", "1111", "234"]


def test_vetores_validos_sem_erros():
    modules, errors = parse_modules([VALIDO, VALIDO])

    assert errors == []
    assert modules[0][0] == [1, 2, 3, 4]
    assert modules[0][6] == [2, 3, 4]


def test_vetor_invalido_gera_diagnostico_mas_converte():
    ruim = ["1234", "56a8", "", "3456", "7890", "1111", "2345"]
    modules, errors = parse_modules([VALIDO, ruim, [""] * 7])

    assert errors == ["Vetor 2 instável.", "Vetor 3 instável."]
    assert len(modules) == 3
    assert modules[1][1] == [5, 6, 8]
    assert modules[1][2] == []
    assert modules[1][6] == [2, 3, 4, 5]
    assert modules[2] == [[]] * 7


def test_centena_com_quatro_digitos_invalida():
    vetor = VALIDO[:6] + ["2345"]
    _, errors = parse_modules([vetor])

    assert errors == ["Vetor 1 instável."]


def test_colar_texto():
    texto = "1234\r\n 56 78 \n\n9012\n3456\n7890\n111122\n23456\n9999"
    assert parse_paste_text(texto, [""] * 7) == [
        "1234", "5678", "9012", "3456", "7890", "1111", "234",
    ]


def test_colar_parcial_mantem_valores_atuais():
    atuais = ["0000", "1111", "2222", "3333", "4444", "5555", "666"]
    assert parse_paste_text("9876\n5432", atuais) == [
        "9876", "5432", "2222", "3333", "4444", "5555", "666",
    ]
