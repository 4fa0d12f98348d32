import asyncio

from .engine import Engine
from .lib.logger import debug
from .models.event import RawInputEvent


async def pump(queue: asyncio.Queue, engine: Engine):
    """
    Feeds queued events into the engine one at a time, until a None is
    dequeued. Producers (device readers, hook callbacks) only ever
    touch the queue, so the engine keeps a single writer.

    Returns the number of labels emitted.
    """
    emitted = 0
    while True:
        event = await queue.get()
        try:
            if event is None:
                debug("Event pump stopping")
                return emitted
            if not isinstance(event, RawInputEvent):
                raise TypeError(f'Expected type RawInputEvent, received {type(event)}.')
            if engine.on_event(event) is not None:
                emitted += 1
        finally:
            queue.task_done()
