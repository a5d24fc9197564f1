"""
Random source construction.

Generation code never reaches for a global generator: callers either pass
an ``AleaPRNG`` in or let these helpers build one from a seed string.
"""

import uuid
from typing import Optional

from ..core.alea_prng import AleaPRNG


def new_seed() -> str:
    """Return a fresh seed string for runs that did not ask for one."""
    return uuid.uuid4().hex[:12]


def create_prng(seed: Optional[str] = None) -> AleaPRNG:
    """
    Build an Alea PRNG.

    Args:
        seed: Seed string; a random one is generated when omitted

    Returns:
        AleaPRNG instance
    """
    return AleaPRNG(seed if seed is not None else new_seed())


def resolve_prng(
    prng: Optional[AleaPRNG] = None, seed: Optional[str] = None
) -> AleaPRNG:
    """Prefer an explicit generator, then a seed, then a fresh seed."""
    if prng is not None:
        return prng
    return create_prng(seed)
