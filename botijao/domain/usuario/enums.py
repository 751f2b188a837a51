# botijao/domain/usuario/enums.py
from enum import StrEnum


class UserType(StrEnum):
    INDIVIDUAL = "individual"
    COMPANY = "company"


USER_TYPE_LABELS: dict[str, str] = {
    UserType.INDIVIDUAL: "Pessoa Fisica",
    UserType.COMPANY: "Pessoa Juridica",
}


def user_type_label(user_type: str) -> str:
    return USER_TYPE_LABELS.get(user_type, "Tipo desconhecido")
