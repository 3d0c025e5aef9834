"""Observable values — live state that consumers can react to.

The coordinator's error total and each field's messages are exposed as
``Observable`` instances. Consumers either read ``.value`` when they need
it, register a synchronous callback, or follow changes asynchronously::

    container = use_form_container()

    # Sync: enable the submit button whenever the form becomes valid
    unsubscribe = container.total_errors.subscribe(
        lambda total: button.set_enabled(total == 0)
    )

    # Async: stream totals to a live dashboard
    async for total in container.total_errors.changes():
        await push(total)

Writers and subscribers run on one logical thread, so there is no
locking. Callbacks run synchronously inside ``set()``; an exception
raised by a callback propagates to the writer.
"""

import contextlib
from collections.abc import AsyncIterator, Callable

import anyio
from anyio.streams.memory import MemoryObjectSendStream

type Unsubscribe = Callable[[], None]


class Observable[T]:
    """A value plus the set of parties watching it.

    ``set()`` with a value equal to the current one is a no-op, so
    subscribers only hear about real changes.
    """

    __slots__ = ("_buffer_size", "_callbacks", "_streams", "_value")

    def __init__(self, value: T, *, buffer_size: int = 256) -> None:
        self._value = value
        self._callbacks: list[Callable[[T], None]] = []
        self._streams: set[MemoryObjectSendStream[T]] = set()
        self._buffer_size = buffer_size

    @property
    def value(self) -> T:
        """The current value."""
        return self._value

    def set(self, value: T) -> None:
        """Replace the value and notify subscribers if it changed."""
        if value == self._value:
            return
        self._value = value
        for callback in list(self._callbacks):
            callback(value)
        for stream in list(self._streams):
            try:
                stream.send_nowait(value)
            except anyio.WouldBlock:
                # Drop the value for slow consumers rather than blocking
                pass
            except (anyio.BrokenResourceError, anyio.ClosedResourceError):
                self._streams.discard(stream)

    def subscribe(self, callback: Callable[[T], None]) -> Unsubscribe:
        """Call *callback* with each new value.

        Returns a zero-argument function that removes the subscription.
        Calling it more than once is harmless.
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._callbacks.remove(callback)

        return unsubscribe

    async def changes(self) -> AsyncIterator[T]:
        """Yield each new value as it is set.

        Each iterator gets its own bounded anyio memory stream. The
        subscription is cleaned up when the iterator exits, and ends
        cleanly when ``close()`` is called.
        """
        send, receive = anyio.create_memory_object_stream[T](
            max_buffer_size=self._buffer_size
        )
        self._streams.add(send)
        try:
            async with receive:
                async for value in receive:
                    yield value
        finally:
            self._streams.discard(send)
            send.close()

    def close(self) -> None:
        """End every active ``changes()`` iterator.

        Values already buffered are still delivered before the
        iterators stop.
        """
        for stream in list(self._streams):
            stream.close()
        self._streams.clear()

    @property
    def subscriber_count(self) -> int:
        """Number of callbacks plus active async streams."""
        return len(self._callbacks) + len(self._streams)

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
