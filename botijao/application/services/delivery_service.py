# botijao/application/services/delivery_service.py
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import Any

from botijao.domain.entrega.entities import Delivery, build_invoice, generate_invoice_number
from botijao.domain.entrega.enums import STATUS_LABELS, DeliveryPriority, DeliveryStatus
from botijao.domain.entrega.repository import DeliveryFilters, DeliveryRepository
from botijao.domain.entrega.stats import compute_delivery_stats
from botijao.domain.entrega.value_objects import DeliveryAddress, DeliveryItem
from botijao.domain.shared.errors import NotFoundError, TransitionError, ValidationError
from botijao.infrastructure.log import log

from ..dtos.common_dto import OperationResultDTO
from ..dtos.entrega_dto import DeliveryDTO, DeliveryStatsDTO, InvoiceDTO
from ..dtos.estoque_dto import OrderItemDTO
from .inventory_service import MSG_QTD_POSITIVA, InventoryService


class DeliveryService:
    """Ciclo de vida da entrega: pending -> accepted -> in_progress -> delivered,
    ou pending -> rejected. O store aceita qualquer status; a regra vive nos
    predicados can_* do dominio, consultados aqui antes de cada escrita."""

    def __init__(
        self,
        repo: DeliveryRepository,
        inventory_service: InventoryService | None = None,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._inventory_service = inventory_service
        self._relogio = relogio

    def list_by_gas_station(
        self,
        gas_station_id: str,
        status: str | None = None,
        priority: str | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> list[DeliveryDTO]:
        filtros = DeliveryFilters(status=status, priority=priority, date_from=date_from, date_to=date_to)
        return [DeliveryDTO.from_domain(d) for d in self._repo.get_by_gas_station(gas_station_id, filtros)]

    def get(self, delivery_id: str) -> DeliveryDTO:
        return DeliveryDTO.from_domain(self._obter(delivery_id))

    def create(self, dados: dict[str, Any]) -> OperationResultDTO:
        agora = self._relogio()
        endereco = dados.get("delivery_address")
        prioridade = dados.get("priority") or DeliveryPriority.MEDIUM
        if prioridade not in {p.value for p in DeliveryPriority}:
            raise ValidationError("Prioridade invalida")
        entrega = Delivery(
            gas_station_id=dados.get("gas_station_id") or "",
            customer_name=(dados.get("customer_name") or "").strip(),
            customer_phone=(dados.get("customer_phone") or "").strip(),
            customer_email=dados.get("customer_email"),
            delivery_address=DeliveryAddress(**endereco) if endereco else None,
            items=tuple(
                DeliveryItem(i["product_name"], int(i["quantity"]), Decimal(str(i["price"])))
                for i in dados.get("items") or []
            ),
            total_amount=Decimal(str(dados.get("total_amount") or 0)),
            priority=prioridade,
            estimated_delivery=dados.get("estimated_delivery"),
            notes=dados.get("notes"),
            order_date=agora,
            created_at=agora,
            updated_at=agora,
        )
        erros = entrega.validate()
        if erros:
            raise ValidationError(erros)

        criada = self._repo.create(entrega)
        log(f"entrega {criada.id} criada no posto {criada.gas_station_id} ({criada.formatted_total})")
        return OperationResultDTO(
            success=True, message="Entrega criada com sucesso", data=DeliveryDTO.from_domain(criada),
        )

    def accept(self, delivery_id: str) -> OperationResultDTO:
        entrega = self._obter(delivery_id)
        _exigir(entrega.can_be_accepted(), entrega, "aceita")
        if self._inventory_service is None:
            return self._transicionar(entrega, DeliveryStatus.ACCEPTED, "Entrega aceita com sucesso")

        if any(i.quantity <= 0 for i in entrega.items):
            raise ValidationError(MSG_QTD_POSITIVA)
        pedido = [OrderItemDTO(product=i.product_name, quantity=i.quantity) for i in entrega.items]
        self._inventory_service.decrement_stock_for_order(entrega.gas_station_id, pedido)
        try:
            return self._transicionar(entrega, DeliveryStatus.ACCEPTED, "Entrega aceita com sucesso")
        except Exception:
            # Status nao gravado: a baixa nao pode ficar
            self._inventory_service.restore_stock_for_order(entrega.gas_station_id, pedido)
            raise

    def reject(self, delivery_id: str, reason: str | None = None) -> OperationResultDTO:
        entrega = self._obter(delivery_id)
        _exigir(entrega.can_be_rejected(), entrega, "rejeitada")
        extra = {"notes": reason.strip()} if reason and reason.strip() else {}
        return self._transicionar(entrega, DeliveryStatus.REJECTED, "Entrega rejeitada", extra)

    def start(self, delivery_id: str) -> OperationResultDTO:
        entrega = self._obter(delivery_id)
        _exigir(entrega.can_start(), entrega, "iniciada")
        return self._transicionar(entrega, DeliveryStatus.IN_PROGRESS, "Entrega iniciada")

    def complete(self, delivery_id: str) -> OperationResultDTO:
        entrega = self._obter(delivery_id)
        _exigir(entrega.can_complete(), entrega, "concluida")
        return self._transicionar(
            entrega, DeliveryStatus.DELIVERED, "Entrega concluida", {"delivered_at": self._relogio()},
        )

    def generate_invoice(self, delivery_id: str) -> OperationResultDTO:
        entrega = self._obter(delivery_id)
        if not entrega.can_generate_invoice():
            raise TransitionError(
                "Nota fiscal so pode ser gerada para entregas aceitas e ainda sem nota"
            )
        agora = self._relogio()
        numero = generate_invoice_number(entrega.id or delivery_id, agora.date())
        salva = self._repo.update_invoice(delivery_id, numero, agora)
        log(f"entrega {delivery_id}: nota {numero} emitida")
        return OperationResultDTO(
            success=True,
            message="Nota fiscal gerada com sucesso",
            data=InvoiceDTO.from_domain(build_invoice(salva, numero, agora.date())),
        )

    def stats(
        self,
        gas_station_id: str,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> DeliveryStatsDTO:
        pares = self._repo.list_status_and_priority(gas_station_id, date_from, date_to)
        return DeliveryStatsDTO.from_domain(compute_delivery_stats(pares))

    def _transicionar(
        self,
        entrega: Delivery,
        status: DeliveryStatus,
        mensagem: str,
        extra: dict[str, Any] | None = None,
    ) -> OperationResultDTO:
        campos = {"updated_at": self._relogio(), **(extra or {})}
        salva = self._repo.update_status(entrega.id or "", status, campos)
        log(f"entrega {entrega.id}: {entrega.status} -> {status}")
        return OperationResultDTO(success=True, message=mensagem, data=DeliveryDTO.from_domain(salva))

    def _obter(self, delivery_id: str) -> Delivery:
        entrega = self._repo.get_by_id(delivery_id)
        if entrega is None:
            raise NotFoundError("Entrega", feminino=True)
        return entrega


def _exigir(permitido: bool, entrega: Delivery, acao: str) -> None:
    if not permitido:
        atual = STATUS_LABELS.get(entrega.status, entrega.status)
        raise TransitionError(f"Entrega nao pode ser {acao} no status atual ({atual})")
