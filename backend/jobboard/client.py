"""
HTTP client for the job board API.

Fetches the full posting list once per refresh and answers filter/sort queries
locally through the query engine, the same split the public job page uses.
"""
import logging
import time
from typing import Callable

import requests

from jobboard.schemas.job import JobResponse
from jobboard.services.query_service import FilterState, JobQueryEngine, filter_options

logger = logging.getLogger(__name__)


class JobBoardClientError(Exception):
    pass


class JobBoardClient:
    def __init__(self, base_url: str, api_prefix: str = "/api", timeout: float = 10.0,
                 session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.timeout = timeout
        self.session = session or requests.Session()
        self.jobs: list[JobResponse] = []
        self._engine = JobQueryEngine()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.api_prefix}{path}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, self._url(path), timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise JobBoardClientError(f"{method} {path} failed: {exc}") from exc
        return response

    def refresh(self) -> list[JobResponse]:
        data = self._request("GET", "/jobs").json()
        if not isinstance(data, list):
            data = []
        # A new list object, so the engine drops results computed for the old one.
        self.jobs = [JobResponse.model_validate(item) for item in data]
        return self.jobs

    def query(self, state: FilterState | None = None) -> list[JobResponse]:
        return self._engine.run(self.jobs, state or FilterState())

    def filter_options(self) -> dict[str, list[str]]:
        return filter_options(self.jobs)

    def poll(self, interval: float, iterations: int,
             on_update: Callable[[list[JobResponse]], None] | None = None,
             sleep: Callable[[float], None] = time.sleep) -> list[JobResponse]:
        """Re-fetch the job list every `interval` seconds. Failed fetches keep the last list."""
        for i in range(iterations):
            try:
                jobs = self.refresh()
            except JobBoardClientError as exc:
                logger.warning("Job refresh failed: %s", exc)
            else:
                if on_update:
                    on_update(jobs)
            if i < iterations - 1:
                sleep(interval)
        return self.jobs

    # -- admin --------------------------------------------------------------

    def login(self, username: str, password: str) -> bool:
        try:
            self._request("POST", "/auth", json={"username": username, "password": password})
        except JobBoardClientError:
            return False
        return True

    def is_authenticated(self) -> bool:
        return bool(self._request("GET", "/auth/check").json().get("isAuthenticated"))

    def logout(self):
        self._request("DELETE", "/auth")

    def create_job(self, fields: dict) -> JobResponse:
        return JobResponse.model_validate(self._request("POST", "/jobs", json=fields).json())

    def update_job(self, job_id: str, fields: dict) -> JobResponse:
        response = self._request("PUT", "/jobs", params={"id": job_id}, json=fields)
        return JobResponse.model_validate(response.json())

    def delete_job(self, job_id: str):
        self._request("DELETE", "/jobs", params={"id": job_id})

    def apply(self, name: str, email: str, mobile: str, qualifications: str, job_title: str):
        self._request("POST", "/apply", json={
            "name": name,
            "email": email,
            "mobile": mobile,
            "qualifications": qualifications,
            "jobTitle": job_title,
        })
