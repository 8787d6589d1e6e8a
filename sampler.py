#!/usr/bin/env python3
# sampler.py - draw a random, ordered subset of the question bank

import logging
import random
from typing import Sequence, Tuple, TypeVar

from errors import BankUnderflowError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sample(bank: Sequence[T], count: int, rng=None) -> Tuple[T, ...]:
    """Pick `count` distinct items from `bank` in uniformly random order.

    Partial Fisher-Yates: only the first `count` slots of a copy are
    shuffled, so every subset and every ordering of it is equally likely.
    `rng` needs a `randrange` method; seed a `random.Random` for repeatable
    draws. The bank itself is never modified.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if count > len(bank):
        raise BankUnderflowError(count, len(bank))
    rng = rng or random
    pool = list(bank)
    for i in range(count):
        j = rng.randrange(i, len(pool))
        pool[i], pool[j] = pool[j], pool[i]
    logger.debug("sampled %d of %d questions", count, len(pool))
    return tuple(pool[:count])
