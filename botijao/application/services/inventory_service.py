# botijao/application/services/inventory_service.py
from __future__ import annotations

import dataclasses
from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal
from typing import Any

from botijao.domain.estoque.entities import InventoryItem
from botijao.domain.estoque.enums import StockStatus
from botijao.domain.estoque.repository import InventoryRepository
from botijao.domain.estoque.status import map_product_name_to_type
from botijao.domain.shared.errors import (
    BackendError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from botijao.infrastructure.log import log

from ..dtos.common_dto import OperationResultDTO
from ..dtos.estoque_dto import (
    InventoryItemDTO,
    InventoryStatsDTO,
    OrderItemDTO,
    StockAvailabilityDTO,
    StockCheckItemDTO,
)

MSG_POSTO_OBRIGATORIO = "ID do ponto de venda e obrigatorio"
MSG_QTD_POSITIVA = "Quantidade deve ser maior que zero"
MSG_QTD_INSUFICIENTE = "Quantidade insuficiente em estoque"
MSG_PRODUTO_DUPLICADO = "Este produto ja existe no estoque deste ponto de venda"

_EDITAVEIS = frozenset({
    "quantity", "min_quantity", "max_quantity", "unit_price", "supplier",
    "next_restock_date", "notes",
})


class InventoryService:
    """Orquestra o estoque por posto. Status nunca vem de fora: e sempre
    recalculado a partir das quantidades."""

    def __init__(
        self,
        repo: InventoryRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._relogio = relogio

    def create(self, dados: dict[str, Any]) -> OperationResultDTO:
        agora = self._relogio()
        item = InventoryItem(
            gas_station_id=dados.get("gas_station_id") or "",
            product_type=(dados.get("product_type") or "").strip().lower(),
            quantity=int(dados.get("quantity") or 0),
            min_quantity=int(dados.get("min_quantity") or 0),
            max_quantity=int(dados.get("max_quantity") or 0),
            unit_price=Decimal(str(dados.get("unit_price") or 0)),
            supplier=dados.get("supplier"),
            next_restock_date=dados.get("next_restock_date"),
            notes=dados.get("notes"),
            created_at=agora,
            updated_at=agora,
        )
        erros = item.validate()
        if erros:
            raise ValidationError(erros)
        if self._repo.get_by_product_type(item.gas_station_id, item.product_type) is not None:
            raise ConflictError(MSG_PRODUTO_DUPLICADO)

        criado = self._repo.create(item)
        log(f"estoque {criado.id}: {criado.product_type} criado no posto {criado.gas_station_id} ({criado.status})")
        return OperationResultDTO(
            success=True, message="Item de estoque criado com sucesso", data=InventoryItemDTO.from_domain(criado),
        )

    def update(self, inventory_id: str, dados: dict[str, Any]) -> OperationResultDTO:
        atual = self._obter(inventory_id)
        mudancas = {k: v for k, v in dados.items() if k in _EDITAVEIS and v is not None}
        if "unit_price" in mudancas:
            mudancas["unit_price"] = Decimal(str(mudancas["unit_price"]))
        mudancas["updated_at"] = self._relogio()

        mesclado = dataclasses.replace(atual, **mudancas)
        erros = mesclado.validate()
        if erros:
            raise ValidationError(erros)

        salvo = self._repo.update(inventory_id, mudancas)
        log(f"estoque {inventory_id} atualizado ({salvo.status})")
        return OperationResultDTO(
            success=True, message="Item de estoque atualizado com sucesso", data=InventoryItemDTO.from_domain(salvo),
        )

    def delete(self, inventory_id: str) -> OperationResultDTO:
        self._obter(inventory_id)
        self._repo.delete(inventory_id)
        log(f"estoque {inventory_id} removido")
        return OperationResultDTO(success=True, message="Item de estoque removido com sucesso")

    def get(self, inventory_id: str) -> InventoryItemDTO:
        return InventoryItemDTO.from_domain(self._obter(inventory_id))

    def list_by_gas_station(self, gas_station_id: str) -> list[InventoryItemDTO]:
        _exigir_posto(gas_station_id)
        return [InventoryItemDTO.from_domain(i) for i in self._repo.get_by_gas_station_id(gas_station_id)]

    def low_stock(self, gas_station_id: str) -> list[InventoryItemDTO]:
        _exigir_posto(gas_station_id)
        return [InventoryItemDTO.from_domain(i) for i in self._repo.get_low_stock_items(gas_station_id)]

    def out_of_stock(self, gas_station_id: str) -> list[InventoryItemDTO]:
        _exigir_posto(gas_station_id)
        return [InventoryItemDTO.from_domain(i) for i in self._repo.get_out_of_stock_items(gas_station_id)]

    def add_stock(self, inventory_id: str, quantidade: int) -> OperationResultDTO:
        if quantidade <= 0:
            raise ValidationError(MSG_QTD_POSITIVA)
        item = self._obter(inventory_id).add_stock(quantidade, self._relogio())
        salvo = self._gravar_movimento(item, "adicionar estoque")
        log(f"estoque {inventory_id}: +{quantidade} -> {salvo.quantity}")
        return OperationResultDTO(
            success=True, message="Estoque adicionado com sucesso", data=InventoryItemDTO.from_domain(salvo),
        )

    def remove_stock(self, inventory_id: str, quantidade: int) -> OperationResultDTO:
        if quantidade <= 0:
            raise ValidationError(MSG_QTD_POSITIVA)
        atual = self._obter(inventory_id)
        if atual.quantity < quantidade:
            raise ValidationError(MSG_QTD_INSUFICIENTE)
        salvo = self._gravar_movimento(atual.remove_stock(quantidade, self._relogio()), "remover estoque")
        log(f"estoque {inventory_id}: -{quantidade} -> {salvo.quantity}")
        return OperationResultDTO(
            success=True, message="Estoque removido com sucesso", data=InventoryItemDTO.from_domain(salvo),
        )

    def stats(self, gas_station_id: str) -> InventoryStatsDTO:
        itens = self._repo.get_by_gas_station_id(gas_station_id)
        por_status = {s: sum(1 for i in itens if i.status == s) for s in StockStatus}
        return InventoryStatsDTO(
            total_items=len(itens),
            total_value=str(sum((i.total_value for i in itens), Decimal("0"))),
            in_stock=por_status[StockStatus.IN_STOCK],
            low_stock=por_status[StockStatus.LOW_STOCK],
            out_of_stock=por_status[StockStatus.OUT_OF_STOCK],
            overstocked=por_status[StockStatus.OVERSTOCKED],
            needs_restock=sum(1 for i in itens if i.needs_restock),
        )

    def check_stock_availability(
        self, gas_station_id: str, itens: Iterable[OrderItemDTO],
    ) -> StockAvailabilityDTO:
        """Linhas do mesmo produto sao somadas antes de comparar com o estoque."""
        _exigir_posto(gas_station_id)
        itens = list(itens)
        if not itens:
            raise ValidationError("Itens do pedido sao obrigatorios")
        if any(pedido.quantity <= 0 for pedido in itens):
            raise ValidationError(MSG_QTD_POSITIVA)

        pedido_por_tipo: dict[str, int] = defaultdict(int)
        for pedido in itens:
            tipo = map_product_name_to_type(pedido.product)
            if tipo is not None:
                pedido_por_tipo[tipo] += pedido.quantity
        estoque = {
            tipo: self._repo.get_by_product_type(gas_station_id, tipo) for tipo in pedido_por_tipo
        }

        disponiveis: list[StockCheckItemDTO] = []
        faltantes: list[StockCheckItemDTO] = []
        for pedido in itens:
            tipo = map_product_name_to_type(pedido.product)
            if tipo is None:
                faltantes.append(StockCheckItemDTO(
                    product=pedido.product, requested=pedido.quantity, available=0,
                    reason="Produto nao encontrado no catalogo",
                ))
                continue
            item = estoque[tipo]
            if item is None:
                faltantes.append(StockCheckItemDTO(
                    product=pedido.product, requested=pedido.quantity, available=0,
                    product_type=tipo, reason="Produto nao cadastrado no estoque",
                ))
            elif item.quantity < pedido_por_tipo[tipo]:
                faltantes.append(StockCheckItemDTO(
                    product=pedido.product, requested=pedido.quantity, available=item.quantity,
                    product_type=tipo, inventory_id=item.id,
                    reason=f"Estoque insuficiente (disponivel: {item.quantity})",
                ))
            else:
                disponiveis.append(StockCheckItemDTO(
                    product=pedido.product, requested=pedido.quantity, available=item.quantity,
                    product_type=tipo, inventory_id=item.id,
                ))
        return StockAvailabilityDTO(
            has_stock=not faltantes, available_items=disponiveis, unavailable_items=faltantes,
        )

    def decrement_stock_for_order(
        self, gas_station_id: str, itens: Iterable[OrderItemDTO],
    ) -> list[InventoryItemDTO]:
        """Tudo ou nada: as novas quantidades sao calculadas antes de qualquer
        escrita, e uma falha no meio desfaz as baixas ja gravadas."""
        disponibilidade = self.check_stock_availability(gas_station_id, itens)
        if not disponibilidade.has_stock:
            faltas = ", ".join(f"{i.product}: {i.reason}" for i in disponibilidade.unavailable_items)
            raise ValidationError(f"Estoque insuficiente: {faltas}")

        baixas: dict[str, int] = defaultdict(int)
        for item in disponibilidade.available_items:
            baixas[item.inventory_id or ""] += item.requested

        agora = self._relogio()
        movimentos: list[tuple[InventoryItem, InventoryItem]] = []
        for inventory_id, quantidade in baixas.items():
            atual = self._obter(inventory_id)
            if atual.quantity < quantidade:
                raise ValidationError(MSG_QTD_INSUFICIENTE)
            movimentos.append((atual, atual.remove_stock(quantidade, agora)))

        salvos = self._aplicar_movimentos(movimentos, "remover estoque")
        for (atual, _), salvo in zip(movimentos, salvos):
            log(f"estoque {salvo.id}: -{atual.quantity - salvo.quantity} -> {salvo.quantity} (pedido)")
        return [InventoryItemDTO.from_domain(s) for s in salvos]

    def restore_stock_for_order(
        self, gas_station_id: str, itens: Iterable[OrderItemDTO],
    ) -> list[InventoryItemDTO]:
        """Devolve ao estoque o que decrement_stock_for_order baixou.
        Nao conta como reposicao: last_restock_date fica como esta."""
        _exigir_posto(gas_station_id)
        devolucoes: dict[str, int] = defaultdict(int)
        for pedido in itens:
            tipo = map_product_name_to_type(pedido.product)
            if tipo is not None and pedido.quantity > 0:
                devolucoes[tipo] += pedido.quantity

        agora = self._relogio()
        movimentos: list[tuple[InventoryItem, InventoryItem]] = []
        for tipo, quantidade in devolucoes.items():
            atual = self._repo.get_by_product_type(gas_station_id, tipo)
            if atual is None:
                raise NotFoundError("Item de estoque", mensagem=f"Item de estoque {tipo} nao encontrado")
            movimentos.append((
                atual, dataclasses.replace(atual, quantity=atual.quantity + quantidade, updated_at=agora),
            ))

        salvos = self._aplicar_movimentos(movimentos, "devolver estoque")
        log(f"estoque devolvido no posto {gas_station_id}: {dict(devolucoes)}")
        return [InventoryItemDTO.from_domain(s) for s in salvos]

    def _aplicar_movimentos(
        self, movimentos: list[tuple[InventoryItem, InventoryItem]], acao: str,
    ) -> list[InventoryItem]:
        gravados: list[tuple[InventoryItem, InventoryItem]] = []
        try:
            for atual, novo in movimentos:
                gravados.append((atual, self._gravar_movimento(novo, acao)))
        except Exception:
            for atual, _ in reversed(gravados):
                self._repo.update(atual.id or "", {
                    "quantity": atual.quantity,
                    "last_restock_date": atual.last_restock_date,
                    "updated_at": atual.updated_at,
                })
                log(f"estoque {atual.id}: baixa desfeita, volta para {atual.quantity}")
            raise
        return [salvo for _, salvo in gravados]

    def _gravar_movimento(self, item: InventoryItem, acao: str) -> InventoryItem:
        try:
            return self._repo.update(item.id or "", {
                "quantity": item.quantity,
                "last_restock_date": item.last_restock_date,
                "updated_at": item.updated_at,
            })
        except BackendError as exc:
            log(f"falha ao {acao} ({item.id}): {exc}")
            raise BackendError(f"Erro ao {acao}: {exc}") from exc

    def _obter(self, inventory_id: str) -> InventoryItem:
        item = self._repo.get_by_id(inventory_id)
        if item is None:
            raise NotFoundError("Item de estoque")
        return item


def _exigir_posto(gas_station_id: str | None) -> None:
    if not gas_station_id:
        raise ValidationError(MSG_POSTO_OBRIGATORIO)
