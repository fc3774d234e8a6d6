"""Row dataclasses for profiles and cases."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CaseStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    CLOSED = "closed"


@dataclass(frozen=True)
class Profile:
    id: str
    user_id: str
    first_name: str
    last_name: str
    is_pro: bool
    created_at: str

    @classmethod
    def from_row(cls, row: dict) -> "Profile":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            is_pro=bool(row.get("is_pro", False)),
            created_at=row.get("created_at") or "",
        )

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class Case:
    id: str
    user_id: str
    title: str
    description: Optional[str]
    status: str
    file_count: int
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, row: dict) -> "Case":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            title=row["title"],
            description=row.get("description"),
            status=row.get("status") or CaseStatus.ACTIVE.value,
            file_count=int(row.get("file_count") or 0),
            created_at=row.get("created_at") or "",
            updated_at=row.get("updated_at") or "",
        )
