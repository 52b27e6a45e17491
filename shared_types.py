# shared_types.py  ──  the only types every module shares
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

Category = Literal[
    'Authentication',
    'HR_Services',
    'IT_Support',
    'System_Issues',
    'General_Inquiry',
]
Priority = Literal['High', 'Medium', 'Low']
Status = Literal['Processing', 'Responded', 'Escalated']

PROCESSING: Status = 'Processing'
RESPONDED: Status = 'Responded'
ESCALATED: Status = 'Escalated'   # reserved, nothing sets it yet


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ClassificationResult:
    category: Category
    confidence: float             # ∈ [0,1]
    priority: Priority
    color: str
    response: str


@dataclass
class Ticket:
    id: str
    user: str
    text: str
    created_at: datetime
    status: Status
    category: Category
    confidence: float
    priority: Priority
    color: str
    response: str

    @property
    def confidence_percent(self) -> int:
        return round_half_up(self.confidence * 100)

    @classmethod
    def from_classification(
        cls,
        ticket_id: str,
        user: str,
        text: str,
        created_at: datetime,
        result: ClassificationResult,
    ) -> "Ticket":
        return cls(
            id=ticket_id,
            user=user,
            text=text,
            created_at=created_at,
            status=PROCESSING,
            category=result.category,
            confidence=result.confidence,
            priority=result.priority,
            color=result.color,
            response=result.response,
        )


@dataclass(frozen=True)
class CategoryStats:
    count: int
    percentage: int
