from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee (owned by the staff module, read-only here)."""

    employee_id: int
    first_name: str
    last_name: str
    username: str
    middle_name: Optional[str] = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)
