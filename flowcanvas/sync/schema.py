from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass
class BatchResult:
    count: int
    element_ids: List[str] = field(default_factory=list)
    success: bool = True

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "BatchResult":
        if not payload.get("success", False):
            error = payload.get("error") or "unknown error"
            raise ValueError(f"Canvas server rejected batch: {error}")

        elements_payload = payload.get("elements")
        if not isinstance(elements_payload, Iterable) or isinstance(elements_payload, (str, bytes)):
            raise ValueError("Batch response must include iterable 'elements'.")

        element_ids: List[str] = []
        for element in elements_payload:
            if not isinstance(element, dict) or "id" not in element:
                raise ValueError("Every created element must include an 'id'.")
            element_ids.append(str(element["id"]))

        count = payload.get("count")
        if count is None:
            count = len(element_ids)
        return cls(count=int(count), element_ids=element_ids)


@dataclass
class HealthStatus:
    status: str
    elements_count: Optional[int] = None

    @property
    def healthy(self) -> bool:
        return self.status == "healthy"

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "HealthStatus":
        if "status" not in payload:
            raise ValueError("Health response must include 'status'.")
        count = payload.get("elements_count")
        return cls(status=str(payload["status"]), elements_count=int(count) if count is not None else None)
