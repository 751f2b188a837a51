# botijao/domain/entregador/value_objects.py
from __future__ import annotations

from types import MappingProxyType

from botijao.domain.shared.cnpj import only_digits

# Capacidades que um entregador pode receber. Tags desconhecidas sao aceitas
# (o store e a fonte da verdade), mas so estas tem label.
AVAILABLE_PERMISSIONS = MappingProxyType({
    "view_orders": "Visualizar Pedidos",
    "update_deliveries": "Atualizar Entregas",
    "manage_invoices": "Gerenciar Notas Fiscais",
    "view_customers": "Visualizar Clientes",
    "access_reports": "Acessar Relatorios",
})


def mascarar_cpf(cpf: str) -> str:
    """***.XXX.XXX-**: formato seguro para logs. CPF nunca e logado completo."""
    d = only_digits(cpf)
    if len(d) != 11:
        return "***"
    return f"***.{d[3:6]}.{d[6:9]}-**"


def normalizar_permissoes(permissoes: object) -> frozenset[str]:
    """Qualquer iteravel de tags vira um conjunto de strings nao-vazias."""
    if permissoes is None:
        return frozenset()
    if isinstance(permissoes, str):
        raise TypeError("Permissoes devem ser uma colecao de strings, nao uma string")
    return frozenset(str(p).strip() for p in permissoes if str(p).strip())  # type: ignore[attr-defined]
