# botijao/application/dtos/common_dto.py
from typing import Any

from pydantic import BaseModel


class OperationResultDTO(BaseModel):
    success: bool
    message: str
    data: Any = None
