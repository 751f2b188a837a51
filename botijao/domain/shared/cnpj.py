# botijao/domain/shared/cnpj.py
from __future__ import annotations

PESOS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
PESOS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

# Sintaticamente validos (o checksum fecha), mas sem significado.
SEQUENCIAS_INVALIDAS = frozenset(str(d) * 14 for d in range(10))

MSG_OBRIGATORIO = "CNPJ e obrigatorio"
MSG_COMPRIMENTO = "CNPJ deve ter 14 digitos"
MSG_INVALIDO = "CNPJ invalido"


def only_digits(raw: str | None) -> str:
    return "".join(c for c in (raw or "") if c.isdigit())


def _digito(digitos: str, pesos: tuple[int, ...]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def calculate_check_digits(base: str) -> str:
    """Os dois digitos verificadores para os 12 primeiros digitos."""
    if len(base) != 12 or not base.isdigit():
        raise ValueError("Base do CNPJ deve ter 12 digitos")
    d1 = _digito(base, PESOS_1)
    d2 = _digito(base + str(d1), PESOS_2)
    return f"{d1}{d2}"


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    if int(digitos[12]) != _digito(digitos[:12], PESOS_1):
        return False
    return int(digitos[13]) == _digito(digitos[:13], PESOS_2)


def check_cnpj(raw: str | None) -> str | None:
    """Motivo da rejeicao, ou None se o CNPJ e valido."""
    digitos = only_digits(raw)
    if len(digitos) != 14:
        return MSG_COMPRIMENTO
    if digitos in SEQUENCIAS_INVALIDAS:
        return MSG_INVALIDO
    if not _verificar_cnpj(digitos):
        return MSG_INVALIDO
    return None


def is_valid_cnpj(raw: str | None) -> bool:
    return check_cnpj(raw) is None


def format_cnpj(raw: str | None) -> str:
    """XX.XXX.XXX/XXXX-XX. Apenas apresentacao: nao valida checksum."""
    d = only_digits(raw)
    if len(d) != 14:
        return d
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"
