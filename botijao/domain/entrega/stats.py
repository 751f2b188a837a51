# botijao/domain/entrega/stats.py
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryStats:
    total: int
    by_status: dict[str, int]
    by_priority: dict[str, int]


def compute_delivery_stats(linhas: Iterable[tuple[str | None, str | None]]) -> DeliveryStats:
    """Agrega pares (status, priority). Valores nulos contam no total mas nao nas chaves."""
    total = 0
    por_status: Counter[str] = Counter()
    por_prioridade: Counter[str] = Counter()
    for status, prioridade in linhas:
        total += 1
        if status:
            por_status[status] += 1
        if prioridade:
            por_prioridade[prioridade] += 1
    return DeliveryStats(total=total, by_status=dict(por_status), by_priority=dict(por_prioridade))
