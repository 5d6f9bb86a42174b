"""Resolve analysis workflow ids to pipeline versions."""

import logging
from typing import Dict, Optional

import requests
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from staramr_updater import __version__
from staramr_updater.exceptions import WorkflowNotFoundError
from staramr_updater.services.base import WorkflowResolver

logger = logging.getLogger(__name__)


class StaticWorkflowResolver(WorkflowResolver):
    def __init__(self, versions: Dict[str, str]):
        self._versions = dict(versions)

    def resolve_workflow_version(self, workflow_id: str) -> str:
        try:
            return self._versions[workflow_id]
        except KeyError:
            raise WorkflowNotFoundError(f"Workflow [{workflow_id}] is not found") from None


class HttpWorkflowResolver(WorkflowResolver):
    """Look up workflow descriptions from a workflow registry service.

    ``GET <base_url>/workflows/<id>`` is expected to answer with
    ``{"description": {"version": "..."}}``.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": f"staramr-updater/{__version__}"})

    def resolve_workflow_version(self, workflow_id: str) -> str:
        url = f"{self._base_url}/workflows/{workflow_id}"
        try:
            resp = self._http_get_with_retry(url)
        except RetryError as exc:
            raise WorkflowNotFoundError(
                f"Workflow [{workflow_id}] lookup failed: {exc.last_attempt.exception()}"
            ) from exc
        except requests.RequestException as exc:
            raise WorkflowNotFoundError(f"Workflow [{workflow_id}] lookup failed: {exc}") from exc

        if resp.status_code == 404:
            raise WorkflowNotFoundError(f"Workflow [{workflow_id}] is not found")
        try:
            resp.raise_for_status()
            version = resp.json()["description"]["version"]
        except (requests.HTTPError, ValueError, KeyError, TypeError) as exc:
            raise WorkflowNotFoundError(
                f"Workflow [{workflow_id}] has no usable description: {exc}"
            ) from exc
        if not version:
            raise WorkflowNotFoundError(f"Workflow [{workflow_id}] has an empty version")

        logger.debug("Workflow %s resolved to version %s", workflow_id, version)
        return str(version)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    )
    def _http_get_with_retry(self, url: str) -> requests.Response:
        return self._session.get(url, headers={"Accept": "application/json"}, timeout=30)
