"""Application run loop.

Owns the terminal screen and the root component, and serializes
terminal events, redraw timer ticks and queued updates into one ordered
sequence of handler calls and redraws.

Two tasks are involved while the application runs:

* the *producer* only awaits ``TerminalScreen.poll_event()`` and puts
  each event on a bounded queue (blocking when it is full, never
  dropping input);
* the *loop* takes one item at a time and is the only code that touches
  the component tree.

Anything else that wants to change the UI queues an update with
``queue_update`` (or ``queue_update_threadsafe`` from another thread) and
the loop runs it on its own turn.
"""

from __future__ import annotations

import asyncio
import contextlib
import enum
import inspect
import logging
import threading
from typing import Any, Awaitable, Callable, Union

from tessera.component import Component, is_focusable
from tessera.config import ApplicationConfig
from tessera.errors import ConfigurationError, TerminalError
from tessera.events import (
    Event,
    KeyEvent,
    MouseEvent,
    PasteEndEvent,
    PasteEvent,
    PasteStartEvent,
    ResizeEvent,
)
from tessera.log import enable_debug_log
from tessera.screen import TerminalScreen

logger = logging.getLogger(__name__)

__all__ = ["AppState", "Application", "ScreenFactory", "Update"]

ScreenFactory = Callable[[], TerminalScreen]
Update = Callable[[], Union[None, Awaitable[Any]]]
SuspendAction = Callable[[], Any]


class AppState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    SUSPENDED = "suspended"


class Application:
    """Drives a component tree on a terminal screen.

    *screen_factory* creates a fresh, uninitialized ``TerminalScreen``; it
    is called once by ``start`` and again every time the terminal is
    reacquired after ``suspend``.
    """

    def __init__(
        self,
        screen_factory: ScreenFactory,
        root: Component | None = None,
        config: ApplicationConfig | None = None,
    ) -> None:
        self.config = config or ApplicationConfig()
        self._screen_factory = screen_factory
        self._root = root

        # Read from other threads; written only by the loop task.
        self._screen: TerminalScreen | None = None
        self._screen_lock = threading.Lock()

        self._state = AppState.STOPPED
        self._events: asyncio.Queue[Event | None] = asyncio.Queue(self.config.queue_size)
        self._updates: asyncio.Queue[Update] = asyncio.Queue(self.config.queue_size)

        self._loop: asyncio.AbstractEventLoop | None = None
        self._stop_requested: asyncio.Event | None = None
        self._timer_changed: asyncio.Event | None = None
        self._done: asyncio.Event | None = None
        self._producer: asyncio.Task[None] | None = None
        self._loop_task: asyncio.Task[Any] | None = None

        self._redraw_interval = self.config.redraw_interval
        self._next_tick = 0.0
        self._clear = False

        # Bracketed paste composition
        self._pasting = False
        self._paste_buffer: list[str] = []

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> Component | None:
        return self._root

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def screen(self) -> TerminalScreen | None:
        """The attached terminal screen, or ``None`` while stopped or suspended."""
        with self._screen_lock:
            return self._screen

    def set_redraw_interval(self, seconds: float) -> None:
        """Change the redraw tick period; a running loop restarts its timer."""
        self._redraw_interval = seconds
        self._signal(self._timer_changed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Acquire the terminal and run until stopped.

        Raises ``ConfigurationError`` if there is no root component or the
        application is already running, and ``TerminalError`` if the
        terminal cannot be acquired (or reacquired after a suspend).  The
        terminal is always released before this returns or raises.
        """
        if self._root is None:
            raise ConfigurationError("root component not set")
        if self._state is not AppState.STOPPED:
            raise ConfigurationError("application is already running")

        if self.config.debug_log:
            enable_debug_log(self.config.debug_log)

        self._loop = asyncio.get_running_loop()
        self._loop_task = asyncio.current_task()
        self._stop_requested = asyncio.Event()
        self._timer_changed = asyncio.Event()
        self._done = done = asyncio.Event()
        self._pasting = False
        self._paste_buffer = []

        try:
            self._acquire_screen()
        except BaseException:
            done.set()
            raise

        self._state = AppState.RUNNING
        logger.debug("application started")
        try:
            if is_focusable(self._root):
                self._root.focus()  # type: ignore[union-attr]
            await self._run()
        finally:
            try:
                await self._release_screen()
            finally:
                self._state = AppState.STOPPED
                done.set()
                logger.debug("application stopped")

    def request_stop(self) -> None:
        """Ask the loop to exit without waiting for it.

        Safe to call from event handlers, other tasks and other threads,
        any number of times.
        """
        self._signal(self._stop_requested)

    def _signal(self, event: asyncio.Event | None) -> None:
        """Set a loop-owned event from any thread."""
        loop = self._loop
        if loop is None or event is None or loop.is_closed():
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            event.set()
        else:
            loop.call_soon_threadsafe(event.set)

    async def stop(self) -> None:
        """Stop the loop and wait until it has exited and released the terminal.

        Called from the loop task itself (an async update or handler), this
        only requests the stop, since the loop cannot exit while it waits.
        """
        self.request_stop()
        if asyncio.current_task() is self._loop_task:
            return
        done = self._done
        if done is not None:
            await done.wait()

    async def suspend(self, wait: SuspendAction) -> bool:
        """Hand the terminal to *wait*, then take it back.

        The terminal is released, *wait* runs (a coroutine function is
        awaited, anything else runs in a worker thread), and a new screen
        is acquired.  Returns ``False`` if the application was not running.
        An exception from *wait* is re-raised here after the terminal is
        reacquired; failing to reacquire raises ``TerminalError`` here and
        also ends ``start``.
        """
        if self.screen is None or self._state is not AppState.RUNNING:
            return False
        assert self._loop is not None and self._done is not None

        result: asyncio.Future[bool] = self._loop.create_future()

        async def _suspend_update() -> None:
            try:
                await self._suspend(wait)
            except TerminalError as exc:
                result.set_exception(exc)
                raise
            except Exception as exc:
                result.set_exception(exc)
            else:
                result.set_result(True)

        await self._updates.put(_suspend_update)
        finished = asyncio.ensure_future(self._done.wait())
        try:
            await asyncio.wait({result, finished}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            finished.cancel()
        if result.done():
            return result.result()
        result.cancel()
        return False

    # ------------------------------------------------------------------
    # Queued updates
    # ------------------------------------------------------------------

    async def queue_update(self, update: Update) -> None:
        """Run *update* on the loop's next turn; blocks while the queue is full."""
        await self._updates.put(update)

    def queue_update_threadsafe(self, update: Update) -> None:
        """``queue_update`` for threads other than the loop's.

        Blocks the calling thread until the update has been queued.
        """
        loop = self._loop
        if loop is None or loop.is_closed():
            raise ConfigurationError("application has not been started")
        asyncio.run_coroutine_threadsafe(self._updates.put(update), loop).result()

    async def redraw(self) -> None:
        await self.queue_update(self._redraw)

    async def update(self) -> None:
        """Flush the screen without redrawing the tree."""
        await self.queue_update(self._show)

    async def set_root(self, root: Component) -> None:
        """Replace the root component.

        While running the replacement is queued: the old root is blurred,
        the new one focused, and the screen cleared and redrawn.
        """
        if self._state is AppState.STOPPED:
            self._root = root
            return
        await self.queue_update(lambda: self._replace_root(root))

    # ------------------------------------------------------------------
    # Terminal management
    # ------------------------------------------------------------------

    def _acquire_screen(self) -> None:
        try:
            screen = self._screen_factory()
        except Exception as exc:
            logger.error("could not create terminal screen: %s", exc)
            raise TerminalError("could not create terminal screen") from exc

        try:
            screen.init()
            if self.config.enable_mouse:
                screen.enable_mouse()
            if self.config.enable_paste:
                screen.enable_paste()
        except Exception as exc:
            logger.error("could not initialize terminal: %s", exc)
            with contextlib.suppress(Exception):
                screen.fini()
            raise TerminalError("could not initialize terminal") from exc

        with self._screen_lock:
            self._screen = screen
        self._clear = True
        self._producer = asyncio.ensure_future(self._poll_events(screen))

    async def _release_screen(self) -> None:
        with self._screen_lock:
            screen, self._screen = self._screen, None
        producer, self._producer = self._producer, None
        if producer is not None:
            producer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await producer
        if screen is None:
            return
        try:
            screen.fini()
        except Exception as exc:
            logger.error("could not release terminal: %s", exc)
            raise TerminalError("could not release terminal") from exc

    async def _poll_events(self, screen: TerminalScreen) -> None:
        while True:
            event = await screen.poll_event()
            await self._events.put(event)
            if event is None:
                return

    async def _suspend(self, wait: SuspendAction) -> None:
        self._state = AppState.SUSPENDED
        logger.debug("suspending")
        await self._release_screen()
        try:
            if inspect.iscoroutinefunction(wait):
                await wait()
            else:
                await asyncio.to_thread(wait)
        finally:
            self._acquire_screen()
            self._state = AppState.RUNNING
            logger.debug("resumed")
            self._redraw()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    async def _run(self) -> None:
        assert self._loop is not None
        assert self._stop_requested is not None and self._timer_changed is not None
        loop = self._loop
        timer_changed = self._timer_changed
        event_get: asyncio.Future[Event | None] | None = None
        update_get: asyncio.Future[Update] | None = None
        timer_wait: asyncio.Future[bool] | None = None
        stop_wait = asyncio.ensure_future(self._stop_requested.wait())
        self._next_tick = loop.time() + self._redraw_interval

        self._redraw()
        try:
            while True:
                if event_get is None:
                    event_get = asyncio.ensure_future(self._events.get())
                if update_get is None:
                    update_get = asyncio.ensure_future(self._updates.get())
                if timer_wait is None:
                    timer_wait = asyncio.ensure_future(timer_changed.wait())

                timeout = max(0.0, self._next_tick - loop.time())
                done, _ = await asyncio.wait(
                    {event_get, update_get, timer_wait, stop_wait},
                    timeout=timeout,
                    return_when=asyncio.FIRST_COMPLETED,
                )

                if stop_wait in done:
                    logger.debug("stop requested")
                    return

                if timer_wait in done:
                    timer_changed.clear()
                    timer_wait = None
                    self._next_tick = loop.time() + self._redraw_interval
                    logger.debug("redraw interval set to %ss", self._redraw_interval)

                if not done:
                    self._next_tick = loop.time() + self._redraw_interval
                    self._redraw()
                    continue

                if event_get in done:
                    event = event_get.result()
                    event_get = None
                    if event is None:
                        logger.debug("event source closed")
                        return
                    self._handle_event(event)

                if update_get in done:
                    update = update_get.result()
                    update_get = None
                    result = update()
                    if inspect.isawaitable(result):
                        await result

                # Busy queues must not starve the periodic redraw.
                if loop.time() >= self._next_tick:
                    self._next_tick = loop.time() + self._redraw_interval
                    self._redraw()
        finally:
            for pending in (event_get, update_get, timer_wait, stop_wait):
                if pending is not None:
                    pending.cancel()

    def _handle_event(self, event: Event | PasteEvent) -> None:
        root = self._root
        if root is None:
            return

        if isinstance(event, KeyEvent):
            if self._pasting:
                self._paste_buffer.append(event.text)
            elif root.on_key_event(event):
                self._redraw()
        elif isinstance(event, PasteStartEvent):
            self._pasting = True
            self._paste_buffer = []
        elif isinstance(event, PasteEndEvent):
            if not self._pasting:
                return
            self._pasting = False
            text = "".join(self._paste_buffer)
            self._paste_buffer = []
            if root.on_paste_event(PasteEvent(text)):
                self._redraw()
        elif isinstance(event, PasteEvent):
            if root.on_paste_event(event):
                self._redraw()
        elif isinstance(event, MouseEvent):
            if root.on_mouse_event(event):
                self._redraw()
        elif isinstance(event, ResizeEvent):
            self._clear = True
            self._redraw()
        else:
            logger.debug("ignoring unknown event %r", event)

    def _replace_root(self, root: Component) -> None:
        previous = self._root
        if previous is not root and is_focusable(previous):
            previous.blur()  # type: ignore[union-attr]
        self._root = root
        if is_focusable(root):
            root.focus()  # type: ignore[attr-defined]
        logger.debug("root replaced with %r", root)
        self._clear = True
        self._redraw()

    def _redraw(self) -> None:
        screen = self._screen
        if screen is None or self._root is None:
            return
        screen.hide_cursor()
        if self._clear or self.config.clear_always:
            screen.clear()
            self._clear = False
        self._root.draw(screen)
        screen.show()

    def _show(self) -> None:
        if self._screen is not None:
            self._screen.show()
