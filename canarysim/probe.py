from __future__ import annotations

import time
from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True)
class ProbeResult:
    path: str
    status_code: int | None
    ok: bool
    latency_ms: float
    message: str
    version: str | None = None


@dataclass
class ProbeSummary:
    path: str
    total: int = 0
    ok: int = 0
    failed: int = 0
    avg_latency_ms: float = 0.0
    max_latency_ms: float = 0.0
    versions: list[str] = field(default_factory=list)

    @property
    def failure_ratio(self) -> float:
        if self.total <= 0:
            return 0.0
        return round(self.failed / self.total, 4)

    def as_dict(self) -> dict:
        return {
            "path": self.path,
            "total": self.total,
            "ok": self.ok,
            "failed": self.failed,
            "failure_ratio": self.failure_ratio,
            "avg_latency_ms": self.avg_latency_ms,
            "max_latency_ms": self.max_latency_ms,
            "versions": self.versions,
        }


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 2)


def _version_of(resp: httpx.Response) -> str | None:
    if "json" not in resp.headers.get("content-type", ""):
        return None
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("version"), str):
        return data["version"]
    return None


def probe_endpoint(
    base_url: str,
    path: str,
    timeout_s: float = 5.0,
    client: httpx.Client | None = None,
) -> ProbeResult:
    """GET one endpoint and classify the outcome.

    Transport errors are reported in the result, never raised.
    """
    url = base_url.rstrip("/") + path
    owned = client is None
    if owned:
        client = httpx.Client(timeout=timeout_s, follow_redirects=False)
    start = time.perf_counter()
    try:
        resp = client.get(url)
        latency_ms = _elapsed_ms(start)
        ok = resp.status_code == 200
        message = "OK" if ok else f"HTTP {resp.status_code}"
        return ProbeResult(path, resp.status_code, ok, latency_ms, message, _version_of(resp))
    except (httpx.ConnectError, httpx.ReadTimeout):
        return ProbeResult(path, None, False, _elapsed_ms(start), "No response")
    except httpx.HTTPError as e:
        return ProbeResult(path, None, False, _elapsed_ms(start), f"Error: {type(e).__name__}: {e}")
    finally:
        if owned:
            client.close()


def run_probe(
    base_url: str,
    path: str,
    count: int,
    timeout_s: float = 5.0,
    client: httpx.Client | None = None,
) -> ProbeSummary:
    """Hit ``path`` ``count`` times in sequence and aggregate the results."""
    summary = ProbeSummary(path=path)
    owned = client is None
    if owned:
        client = httpx.Client(timeout=timeout_s, follow_redirects=False)
    latencies: list[float] = []
    try:
        for _ in range(max(0, count)):
            r = probe_endpoint(base_url, path, timeout_s=timeout_s, client=client)
            summary.total += 1
            if r.ok:
                summary.ok += 1
            else:
                summary.failed += 1
            latencies.append(r.latency_ms)
            if r.version and r.version not in summary.versions:
                summary.versions.append(r.version)
    finally:
        if owned:
            client.close()

    if latencies:
        summary.avg_latency_ms = round(sum(latencies) / len(latencies), 2)
        summary.max_latency_ms = max(latencies)
    return summary
