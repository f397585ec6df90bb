# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HEAD-probe a URL to see whether something already serves there."""
import httpx

from app.core.logging import get_logger
from app.metrics import LIVENESS_PROBES

logger = get_logger(__name__)


class LivenessProber:
    def __init__(self, http_client: httpx.AsyncClient, timeout: float = 5.0):
        self._client = http_client
        self._timeout = timeout

    async def is_live(self, url: str) -> bool:
        """True only for a 2xx answer. Errors and timeouts count as not live."""
        try:
            resp = await self._client.head(url, timeout=self._timeout, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            LIVENESS_PROBES.labels(result="error").inc()
            logger.debug("Probe %s failed: %s", url, exc)
            return False
        live = resp.is_success
        LIVENESS_PROBES.labels(result="live" if live else "free").inc()
        logger.debug("Probe %s -> %s (live=%s)", url, resp.status_code, live)
        return live
