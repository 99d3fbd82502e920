import asyncio
import concurrent.futures
from contextlib import contextmanager

from chirp_colors import Format, format_color
from chirp_config import LoggerConfig, merge_async_options


class CallbackError(Exception):
    """Raised when a callback reports a failure that is not an exception."""

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


def describe_error(exc):
    return str(exc) or type(exc).__name__


class _LineWriter:
    # Subclasses provide `_config` and `depth`.

    def format_message(self, category, message, icon=None, color=None):
        """Builds a log line: color + indentation + icon + message + reset."""
        config = self._config
        indent = " " * (self.depth * config.indent_size)
        emoji = ""
        if config.use_emojis:
            emoji = f"{config.emoji(category) if icon is None else icon} "
        prefix = suffix = ""
        if config.use_colors:
            prefix = format_color(config.color(category) if color is None else color)
            suffix = config.reset
        body = "" if message is None else message
        return f"{prefix}{indent}{emoji}{body}{suffix}"

    def _write(self, category, message, icon, color):
        print(self.format_message(category, message, icon=icon, color=color))
        return self

    def _format_group(self, label):
        indent = " " * (self.depth * self._config.indent_size)
        emoji = f"{self._config.emoji('group')} " if self._config.use_emojis else ""
        return f"{indent}{emoji}{label}"

    def info(self, message, icon=None, color=None):
        """Prints an informational message."""
        return self._write("info", message, icon, color)

    def success(self, message, icon=None, color=None):
        """Prints a success message."""
        return self._write("success", message, icon, color)

    def warning(self, message, icon=None, color=None):
        """Prints a warning message."""
        return self._write("warning", message, icon, color)

    def error(self, message, icon=None, color=None):
        """Prints an error message."""
        return self._write("error", message, icon, color)

    async def _await_outcome(self, start, opts):
        self.info(opts["loading"], icon=opts["loading_icon"], color=opts["loading_color"])
        try:
            result = await start()
        except Exception as exc:
            self.error(
                f"{opts['error']}: {describe_error(exc)}",
                icon=opts["error_icon"],
                color=opts["error_color"],
            )
            raise
        self.success(opts["success"], icon=opts["success_icon"], color=opts["success_color"])
        return result

    async def promise(self, awaitable, **options):
        """
        Awaits `awaitable`, printing a loading line first and a success or
        error line once it settles. Returns its result or re-raises its error.
        """
        try:
            opts = merge_async_options(options)
        except ValueError:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise
        if isinstance(awaitable, concurrent.futures.Future):
            awaitable = asyncio.wrap_future(awaitable)

        async def start():
            return await awaitable

        return await self._await_outcome(start, opts)

    async def callback(self, starter, **options):
        """
        Runs `starter(done)` and waits for `done(error, result)` to be called.

        Only the first call to `done` counts. It may be made from another
        thread. Logging matches `promise`.
        """
        opts = merge_async_options(options)
        loop = asyncio.get_running_loop()
        outcome = loop.create_future()
        called = False

        def settle(error, result):
            if outcome.done():
                return
            if not error:
                outcome.set_result(result)
            elif isinstance(error, BaseException):
                outcome.set_exception(error)
            else:
                outcome.set_exception(CallbackError(error))

        def done(error=None, result=None):
            nonlocal called
            if called:
                return
            called = True
            loop.call_soon_threadsafe(settle, error, result)

        async def start():
            nonlocal called
            try:
                starter(done)
                return await outcome
            finally:
                # A `done` kept by the starter must not reach a closed loop.
                called = True

        return await self._await_outcome(start, opts)


class ScopedLogger(_LineWriter):
    """
    A snapshot of a logger at a fixed depth.

    Grouping returns a new scope instead of changing shared state, so
    concurrent flows can each keep their own indentation.
    """

    def __init__(self, config, depth=0):
        self._config = config
        self._depth = max(depth, 0)

    @property
    def depth(self):
        return self._depth

    def group(self, label):
        print(self._format_group(label))
        return ScopedLogger(self._config, self._depth + 1)

    def group_end(self):
        return ScopedLogger(self._config, self._depth - 1)


class Logger(_LineWriter):
    """
    Console logger with colors, emoji icons and indented groups.

        logger = Logger(indent_size=4)
        logger.group("Deploy").info("Uploading...").success("Done").group_end()
    """

    Format = Format

    def __init__(self, config=None, **options):
        if config is None:
            config = LoggerConfig(**options)
        elif options:
            raise ValueError("Pass either a LoggerConfig or keyword options, not both.")
        elif not isinstance(config, LoggerConfig):
            raise ValueError(f"config must be a LoggerConfig, got {type(config).__name__}")
        self._config = config
        self._depth = 0

    @property
    def config(self):
        return self._config

    @property
    def depth(self):
        return self._depth

    def group(self, label):
        """Prints a group header and indents the lines that follow."""
        print(self._format_group(label))
        self._depth += 1
        return self

    def group_end(self):
        """Closes the current group. Does nothing outside of a group."""
        if self._depth > 0:
            self._depth -= 1
        return self

    @contextmanager
    def grouped(self, label):
        self.group(label)
        try:
            yield self
        finally:
            self.group_end()

    def scoped(self):
        return ScopedLogger(self._config, self._depth)
