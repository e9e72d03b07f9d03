"""
Mirror fallback resolution.

Tries a provider's mirrors one at a time, cheapest priority first, and
returns the first playable stream. Every attempt gets its own abort token
and a bounded wait; a mirror that is too slow is abandoned and the next
one is tried while the slow attempt winds down in the background.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from app.models.channel import MirrorCandidate, ResolvedStream

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 6000

MirrorResolveFn = Callable[[MirrorCandidate, asyncio.Event], Awaitable[Optional[ResolvedStream]]]

# Abandoned attempts stay referenced until they finish or their loop closes.
# A resolve function that ignores its abort event and never settles keeps
# its task here for the life of the loop.
_abandoned: set[asyncio.Task] = set()


def _release_closed_loops():
    """Forget abandoned attempts whose event loop has been closed."""
    for task in list(_abandoned):
        if task.get_loop().is_closed():
            _abandoned.discard(task)


def _discard_abandoned(task: asyncio.Task):
    _abandoned.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug(f"Abandoned mirror attempt finished with error: {exc!r}")


def _abandon(task: asyncio.Task):
    _abandoned.add(task)
    task.add_done_callback(_discard_abandoned)


async def resolve_with_fallbacks(
    mirrors: list[MirrorCandidate],
    resolve: MirrorResolveFn,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> Optional[ResolvedStream]:
    """
    Resolve a stream by trying mirrors in ascending priority order.

    Args:
        mirrors: Candidate mirrors (not mutated)
        resolve: Coroutine function called as resolve(mirror, abort). The
            abort event is set once the attempt has been abandoned; the
            function should stop its I/O and must not touch shared state
            after that.
        timeout_ms: Maximum time to wait on a single mirror

    Returns:
        The first non-None stream, or None if every mirror failed, timed
        out, or had nothing to play.
    """
    timeout = timeout_ms / 1000
    _release_closed_loops()

    for mirror in sorted(mirrors, key=lambda m: m.priority):
        abort = asyncio.Event()
        try:
            task = asyncio.ensure_future(resolve(mirror, abort))
        except Exception as e:
            logger.debug(f"Mirror {mirror.id} failed: {e!r}")
            continue

        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            abort.set()
            task.cancel()
            raise

        if not done:
            abort.set()
            _abandon(task)
            logger.info(f"Mirror {mirror.id} timed out after {timeout_ms}ms")
            continue

        if task.cancelled():
            logger.debug(f"Mirror {mirror.id} attempt was cancelled")
            continue

        exc = task.exception()
        if exc is not None:
            logger.debug(f"Mirror {mirror.id} failed: {exc!r}")
            continue

        result = task.result()
        if result is not None:
            logger.info(f"Resolved stream via {mirror.id} ({mirror.label})")
            return result

    return None
