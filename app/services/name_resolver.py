# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Turn a user-supplied display name into a free, URL-safe project name.

Uniqueness is checked by probing ``https://{candidate}.{domain}`` rather than
asking the provider, so it is a pre-filter only: two concurrent uploads can
both see a name as free. The provider stays the authority at creation time.
"""
import random
import re
import string
from typing import Optional

from app.core.errors import NameResolutionExhausted
from app.core.logging import get_logger
from app.metrics import NAME_RESOLUTION_ATTEMPTS
from app.services.liveness import LivenessProber

logger = get_logger(__name__)

MAX_NAME_LENGTH = 30
MAX_ROUNDS = 3
MAX_ATTEMPTS = 99
SUFFIX_LENGTHS = (3, 4)

_DISALLOWED = re.compile(r"[^a-z0-9\-_]")


def normalize_name(raw: str) -> str:
    """Lowercase, drop everything outside ``[a-z0-9-_]``, cap at 30 chars."""
    return _DISALLOWED.sub("", raw.strip().lower())[:MAX_NAME_LENGTH]


def random_suffix(rng: random.Random) -> str:
    length = rng.choice(SUFFIX_LENGTHS)
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


class NameResolver:
    def __init__(self, prober: LivenessProber, hosting_domain: str,
                 rng: Optional[random.Random] = None,
                 max_rounds: int = MAX_ROUNDS, max_attempts: int = MAX_ATTEMPTS):
        self._prober = prober
        self._domain = hosting_domain
        self._rng = rng or random.Random()
        self._max_rounds = max_rounds
        self._max_attempts = max_attempts

    def url_for(self, name: str) -> str:
        return f"https://{name}.{self._domain}"

    async def is_taken(self, name: str) -> bool:
        return await self._prober.is_live(self.url_for(name))

    async def resolve(self, raw_name: str) -> str:
        base = normalize_name(raw_name)
        candidate = base
        attempts = 0

        for _ in range(self._max_rounds):
            if not await self.is_taken(candidate):
                NAME_RESOLUTION_ATTEMPTS.observe(attempts + 1)
                logger.info("Resolved name %r -> %r after %d taken candidate(s)",
                            raw_name, candidate, attempts)
                return candidate
            attempts += 1
            if attempts > self._max_attempts:
                raise NameResolutionExhausted("Terlalu banyak percobaan nama")
            # suffix always goes on the base, never stacks on a previous suffix
            candidate = f"{base}{random_suffix(self._rng)}"

        logger.warning("No free name for %r after %d rounds", raw_name, self._max_rounds)
        raise NameResolutionExhausted(f"Nama masih terpakai setelah {self._max_rounds}x cek")
