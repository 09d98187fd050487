"""
ChatId Value Object
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ChatId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("ChatId cannot be empty")

        UUID(self.value)

    def __str__(self) -> str:
        return self.value
