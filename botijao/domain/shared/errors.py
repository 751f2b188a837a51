# botijao/domain/shared/errors.py
from __future__ import annotations

from collections.abc import Mapping


class DomainError(Exception):
    """Base de todos os erros tipados do dominio."""


class ValidationError(DomainError, ValueError):
    """Uma ou mais regras de campo violadas. Sempre recuperavel pelo chamador."""

    def __init__(self, erros: list[str] | str) -> None:
        self.erros: list[str] = [erros] if isinstance(erros, str) else list(erros)
        super().__init__(", ".join(self.erros))


class ConflictError(DomainError):
    """Pre-condicao de unicidade falhou (e-mail, CNPJ, CPF ja cadastrado)."""


class NotFoundError(DomainError):
    """Entidade referenciada nao existe no store."""

    def __init__(self, entidade: str, feminino: bool = False, mensagem: str | None = None) -> None:
        self.entidade = entidade
        sufixo = "encontrada" if feminino else "encontrado"
        super().__init__(mensagem or f"{entidade} nao {sufixo}")


class TransitionError(DomainError):
    """Transicao de estado recusada por um predicado (ex: aceitar entrega ja entregue)."""


class BackendError(DomainError):
    """Falha reportada pelo store ou pelo backend de autenticacao."""


def translate_backend_error(
    error: BaseException,
    tabela: Mapping[str, str],
) -> BackendError | None:
    """Primeira substring conhecida encontrada em str(error) vence.
    Retorna None quando nada bate; o chamador relanca o erro original."""
    mensagem = str(error)
    for trecho, traducao in tabela.items():
        if trecho in mensagem:
            return BackendError(traducao)
    return None
