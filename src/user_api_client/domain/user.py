from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    """User entity as exchanged with the user management service"""

    id: str = ""
    name: str = ""
    age: int = 0

    def to_payload(self) -> dict[str, Any]:
        """Outbound JSON mapping, server assigns the id when it is empty"""
        payload: dict[str, Any] = {}
        if self.id:
            payload["id"] = self.id
        payload["name"] = self.name
        payload["age"] = self.age
        return payload

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "User":
        """Create User from a decoded response mapping"""
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            age=data.get("age", 0),
        )
