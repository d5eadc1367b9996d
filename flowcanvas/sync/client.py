import json
from typing import Any, Callable, Dict, List, Mapping, Optional

import requests

from ..config import resolve_server_url

BATCH_PATH = "/api/elements/batch"
HEALTH_PATH = "/api/health"

Post = Callable[..., requests.Response]
Get = Callable[..., requests.Response]


class CanvasSyncError(RuntimeError):
    pass


def _decode(response: requests.Response) -> Dict[str, Any]:
    if response.status_code >= 400:
        raise CanvasSyncError(
            f"Canvas server error {response.status_code}: {response.text.strip() or 'no message'}"
        )

    try:
        data = response.json()
    except (json.JSONDecodeError, ValueError) as exc:
        raise CanvasSyncError(f"Failed to decode canvas server response: {exc}") from exc

    if not isinstance(data, dict):
        raise CanvasSyncError("Canvas server response must be a JSON object.")
    return data


def post_batch(
    elements: List[Mapping[str, Any]],
    *,
    base_url: Optional[str] = None,
    timeout: float = 30.0,
    post: Post = requests.post,
) -> Dict[str, Any]:
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    url = resolve_server_url(base_url) + BATCH_PATH
    try:
        response = post(url, headers=headers, data=json.dumps({"elements": list(elements)}), timeout=timeout)
    except requests.RequestException as exc:
        raise CanvasSyncError(f"Could not reach canvas server at {url}: {exc}") from exc
    return _decode(response)


def health(
    *,
    base_url: Optional[str] = None,
    timeout: float = 5.0,
    get: Get = requests.get,
) -> Dict[str, Any]:
    url = resolve_server_url(base_url) + HEALTH_PATH
    try:
        response = get(url, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.RequestException as exc:
        raise CanvasSyncError(f"Could not reach canvas server at {url}: {exc}") from exc
    return _decode(response)
