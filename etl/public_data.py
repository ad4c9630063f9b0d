"""
Public search dataset provider.

The backend serves every searchable record from one endpoint:

    GET {SCOUP_API_BASE_URL}/public/search-data/
        → {"faculty": [...], "papers": [...], "patents": [...], "projects": [...]}

Older deployments name the keys facultyData / papersData / patentsData /
projectsData; both spellings are read.

Loading never fails: network errors, non-2xx responses and bodies that are
not JSON fall back to the built-in dataset (etl/fallback.py). A collection
that is missing or not a list becomes []; a single malformed record is
skipped without touching the rest of its collection.

Public API:
    coerce_dataset(payload)          → Dataset
    fetch_dataset(url, session, ...) → Dataset   (raises DatasetFetchError)
    load_dataset(url)                → Dataset   (never raises)
    DatasetContext                   : holder for the active dataset
"""

import asyncio
import logging
import os
import time
from typing import Any

import requests
from pydantic import ValidationError

from discovery.models import Dataset, Faculty, Paper, Patent, Project
from etl.fallback import fallback_dataset

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

API_BASE_URL  = os.getenv("SCOUP_API_BASE_URL", "http://localhost:8000/api").rstrip("/")
DATASET_URL   = os.getenv("SCOUP_DATASET_URL", f"{API_BASE_URL}/public/search-data/")
FETCH_TIMEOUT = float(os.getenv("SCOUP_FETCH_TIMEOUT", "15"))
FETCH_RETRIES = int(os.getenv("SCOUP_FETCH_RETRIES", "3"))

log = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers["User-Agent"] = "SCOUP-Knowledge-Search/1.0"

# (collection, model, accepted payload keys)
COLLECTIONS = (
    ("faculty",  Faculty, ("faculty", "facultyData")),
    ("papers",   Paper,   ("papers", "papersData")),
    ("patents",  Patent,  ("patents", "patentsData")),
    ("projects", Project, ("projects", "projectsData")),
)


class DatasetFetchError(Exception):
    """The remote dataset could not be fetched or decoded."""


# ---------------------------------------------------------------------------
# Shape coercion
# ---------------------------------------------------------------------------

def _coerce_records(name: str, model: type, rows: Any) -> list:
    if not isinstance(rows, list):
        if rows is not None:
            log.warning("Collection %r is %s, not a list; using [].", name, type(rows).__name__)
        return []

    records = []
    for i, row in enumerate(rows):
        try:
            records.append(model.model_validate(row))
        except ValidationError as exc:
            log.warning("Skipping malformed %s record #%d: %s", name, i, exc.errors()[:1])
    return records


def coerce_dataset(payload: Any) -> Dataset:
    """Build a Dataset from a decoded response body, tolerating any shape."""
    if not isinstance(payload, dict):
        log.warning("Dataset body is %s, not an object; using empty dataset.", type(payload).__name__)
        payload = {}

    collections = {}
    for name, model, keys in COLLECTIONS:
        rows = next((payload[k] for k in keys if k in payload), None)
        collections[name] = _coerce_records(name, model, rows)
    return Dataset(**collections)


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def fetch_dataset(
    url: str = DATASET_URL,
    session: requests.Session | None = None,
    timeout: float = FETCH_TIMEOUT,
    retries: int = FETCH_RETRIES,
) -> Dataset:
    """
    GET the dataset.

    Connection errors, timeouts and 5xx responses are retried with
    exponential backoff. 4xx responses and bodies that are not JSON fail on
    the first attempt.
    """
    session = session or SESSION
    last_exc: Exception | None = None

    for attempt in range(retries):
        try:
            resp = session.get(url, timeout=timeout)
            resp.raise_for_status()
        except (requests.ConnectionError, requests.Timeout) as exc:
            last_exc = exc
        except requests.HTTPError as exc:
            if resp.status_code < 500:
                raise DatasetFetchError(f"Could not load dataset from {url}: {exc}") from exc
            last_exc = exc
        except requests.RequestException as exc:
            raise DatasetFetchError(f"Could not load dataset from {url}: {exc}") from exc
        else:
            try:
                body = resp.json()
            except ValueError as exc:
                raise DatasetFetchError(f"Dataset from {url} is not JSON: {exc}") from exc
            return coerce_dataset(body)

        log.warning("Dataset fetch failed (attempt %d/%d) %s: %s", attempt + 1, retries, url, last_exc)
        if attempt < retries - 1:
            time.sleep(2 ** attempt)

    raise DatasetFetchError(f"Could not load dataset from {url}: {last_exc}")


def load_dataset(url: str = DATASET_URL, **kwargs: Any) -> Dataset:
    """Fetch the remote dataset, or return the built-in one on any failure."""
    try:
        dataset = fetch_dataset(url, **kwargs)
    except DatasetFetchError as exc:
        log.warning("%s; using built-in fallback dataset.", exc)
        return fallback_dataset()

    log.info("Loaded dataset from %s: %s", url, dataset.counts())
    return dataset


# ---------------------------------------------------------------------------
# Active dataset
# ---------------------------------------------------------------------------

class DatasetContext:
    """
    Holds the dataset searches run against.

    A fresh context starts with the fallback dataset, so a search issued
    before load() finishes still has data to score. set() swaps the dataset
    atomically; readers always see whichever dataset is installed at the
    time they call get().
    """

    def __init__(self, dataset: Dataset | None = None, url: str = DATASET_URL, **fetch_kwargs: Any):
        self.url = url
        self.fetch_kwargs = fetch_kwargs
        self._dataset = dataset if dataset is not None else fallback_dataset()

    def get(self) -> Dataset:
        return self._dataset

    def set(self, dataset: Dataset | None) -> None:
        self._dataset = dataset if dataset is not None else Dataset()

    async def load(self) -> Dataset:
        """Load from the remote source in a worker thread and install the result."""
        dataset = await asyncio.to_thread(load_dataset, self.url, **self.fetch_kwargs)
        self.set(dataset)
        return dataset

    async def reload(self) -> Dataset:
        """
        Re-fetch from the remote source.

        Unlike load(), a failed fetch keeps whatever dataset is installed
        instead of replacing it with the fallback.
        """
        try:
            dataset = await asyncio.to_thread(fetch_dataset, self.url, **self.fetch_kwargs)
        except DatasetFetchError as exc:
            log.warning("%s; keeping current dataset.", exc)
            return self._dataset

        log.info("Reloaded dataset from %s: %s", self.url, dataset.counts())
        self.set(dataset)
        return dataset


default_context = DatasetContext()
