import uuid
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Record:
    """One persisted upload, keyed by an id the handler generates."""

    id: str
    content: str

    @classmethod
    def new(cls, content: str) -> "Record":
        # uuid4 is 122 random bits; no coordination needed between invocations
        return cls(id=str(uuid.uuid4()), content=content)

    def to_item(self) -> Dict[str, Any]:
        return {
            "id": {"S": self.id},
            "content": {"S": self.content},
        }
