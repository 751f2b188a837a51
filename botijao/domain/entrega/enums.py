# botijao/domain/entrega/enums.py
from enum import StrEnum


class DeliveryStatus(StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in_progress"
    DELIVERED = "delivered"
    REJECTED = "rejected"


class DeliveryPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


STATUS_LABELS: dict[str, str] = {
    DeliveryStatus.PENDING: "Pendente",
    DeliveryStatus.ACCEPTED: "Aceito",
    DeliveryStatus.IN_PROGRESS: "Em Andamento",
    DeliveryStatus.DELIVERED: "Entregue",
    DeliveryStatus.REJECTED: "Rejeitado",
}

PRIORITY_LABELS: dict[str, str] = {
    DeliveryPriority.LOW: "Baixa",
    DeliveryPriority.MEDIUM: "Media",
    DeliveryPriority.HIGH: "Alta",
}
