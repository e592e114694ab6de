from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union
from urllib.parse import urljoin, urlparse

import requests

from core.csv_parser import Dataset, parse_csv


logger = logging.getLogger(__name__)

Location = Union[str, Path]
Loader = Callable[[Location], Awaitable[Optional[str]]]


@dataclass(frozen=True)
class CsvLoadError(RuntimeError):
    url: str
    status_code: int | None
    message: str

    def __str__(self) -> str:
        code = self.status_code if self.status_code is not None else "unknown"
        return f"HTTP {code} for {self.url}: {self.message}"


def is_url(location: Location) -> bool:
    return isinstance(location, str) and urlparse(location).scheme in {"http", "https"}


def resolve_location(base: Optional[Location], path: str) -> Location:
    """Join a dataset path onto a base URL or base directory."""
    if base is None:
        return path
    if is_url(base):
        base_url = str(base) if str(base).endswith("/") else f"{base}/"
        return urljoin(base_url, path)
    return Path(base) / path


def _fetch_text(url: str) -> str:
    resp = requests.get(url)
    if resp.status_code // 100 != 2:
        raise CsvLoadError(url=url, status_code=int(resp.status_code), message=resp.reason or "")
    return resp.text


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


async def load_csv(location: Location) -> Optional[str]:
    """Read raw CSV text from an HTTP(S) URL or a local path.

    Single attempt, no timeout. Transport failures are logged and reported as
    ``None``; callers must treat that as "no data".
    """
    try:
        if is_url(location):
            return await asyncio.to_thread(_fetch_text, str(location))
        return await asyncio.to_thread(_read_text, Path(location))
    except CsvLoadError as exc:
        logger.error("Failed to load CSV: %s", exc)
        return None
    except (requests.RequestException, OSError, ValueError):
        logger.exception("Failed to load CSV from %s", location)
        return None


async def load_and_parse(location: Location, *, loader: Loader = load_csv) -> Optional[Dataset]:
    raw = await loader(location)
    if raw is None:
        return None
    return parse_csv(raw)
