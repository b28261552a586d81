# sim/realtime.py
import asyncio

from pathlab.sim.kernel import Kernel


async def run_realtime(
    kernel: Kernel,
    *,
    until: float | None = None,
    time_scale: float = 1.0,
) -> int:
    """
    Drive `kernel` against the wall clock. Between events the coroutine sleeps, so the
    loop stays free for other work (UI updates, pause requests).

    time_scale multiplies wall-clock waits: 0 runs as fast as possible, 0.5 at double speed.
    """
    if time_scale < 0:
        raise ValueError("time_scale must be >= 0")
    processed = 0
    while True:
        t_next = kernel.peek()
        if t_next is None or (until is not None and t_next > until):
            break
        wait_ms = max(0.0, t_next - kernel.now) * time_scale
        await asyncio.sleep(wait_ms / 1000)
        processed += kernel.run(until=t_next, max_events=1)
    return processed
