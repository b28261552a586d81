# app/wiring.py
from pathlab.app.controllers.playback import PlaybackController
from pathlab.app.events import PlaybackTick
from pathlab.sim.kernel import Kernel


def wire(kernel: Kernel, *, playback: PlaybackController) -> None:
    k = kernel

    # timed auto-advance; stale ticks are dropped by token
    k.on(PlaybackTick, playback.on_tick)
