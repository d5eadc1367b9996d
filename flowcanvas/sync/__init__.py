from .client import CanvasSyncError, health, post_batch
from .publisher import check_health, publish_elements
from .schema import BatchResult, HealthStatus

__all__ = [
    "publish_elements",
    "check_health",
    "post_batch",
    "health",
    "CanvasSyncError",
    "BatchResult",
    "HealthStatus",
]
