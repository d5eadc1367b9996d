import logging
from typing import Any, Callable, Dict, Optional, Sequence

from ..diagram_components import DiagramElement
from .client import CanvasSyncError, health, post_batch
from .schema import BatchResult, HealthStatus

logger = logging.getLogger(__name__)

BatchClient = Callable[..., Dict[str, Any]]
HealthClient = Callable[..., Dict[str, Any]]


def publish_elements(
    elements: Sequence[DiagramElement],
    *,
    client: BatchClient = post_batch,
    client_kwargs: Optional[Dict[str, Any]] = None,
) -> BatchResult:
    if not elements:
        raise CanvasSyncError("Nothing to publish: element list is empty.")

    payload = [element.to_dict() for element in elements]
    response = client(payload, **(client_kwargs or {}))
    try:
        result = BatchResult.from_dict(response)
    except ValueError as exc:
        raise CanvasSyncError(str(exc)) from exc

    logger.debug("Published %d element(s) to canvas server", result.count)
    return result


def check_health(
    *,
    client: HealthClient = health,
    client_kwargs: Optional[Dict[str, Any]] = None,
) -> HealthStatus:
    response = client(**(client_kwargs or {}))
    try:
        return HealthStatus.from_dict(response)
    except ValueError as exc:
        raise CanvasSyncError(str(exc)) from exc
