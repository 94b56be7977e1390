"""A process-wide store of typed setting groups, kept in sync with the editor."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

UpdateHandler = Callable[[Any], None]
Reader = Callable[[], Any]


class EditorVariables(Protocol):
    """The part of an editor connection that settings need: global variables."""

    async def get_var(self, name: str) -> Any: ...

    async def set_var(self, name: str, value: Any) -> Any: ...


class Settings:
    """Holds one settings object per type plus update and read handlers by name.

    Setting groups are stored and retrieved by their type. Named handlers
    connect single editor variables (``<prefix>_<name>``) to those groups.
    """

    def __init__(self, var_prefix: str = "glyphgrid") -> None:
        self.var_prefix = var_prefix
        self._lock = threading.RLock()
        self._values: dict[type, Any] = {}
        self._listeners: dict[str, UpdateHandler] = {}
        self._readers: dict[str, Reader] = {}

    def variable_name(self, name: str) -> str:
        return f"{self.var_prefix}_{name}"

    def set_setting_handlers(
        self, property_name: str, update_func: UpdateHandler, reader_func: Reader
    ) -> None:
        """Register how a named property is applied and how its value is read."""
        with self._lock:
            self._listeners[property_name] = update_func
            self._readers[property_name] = reader_func

    def set(self, value: Any) -> None:
        """Store a copy of ``value`` under its own type."""
        stored = copy.copy(value)
        with self._lock:
            self._values[type(value)] = stored

    def get(self, setting_type: type[T]) -> T:
        """Return a copy of the stored settings object of ``setting_type``."""
        with self._lock:
            try:
                value = self._values[setting_type]
            except KeyError:
                raise KeyError(
                    f"Trying to retrieve a settings object that doesn't exist: "
                    f"{setting_type.__name__}"
                ) from None
        return copy.copy(value)

    def _names(self) -> list[str]:
        with self._lock:
            return list(self._listeners)

    async def read_initial_values(self, nvim: EditorVariables) -> None:
        """Apply each variable the editor already has; publish defaults for the rest."""
        for name in self._names():
            variable_name = self.variable_name(name)
            try:
                value = await nvim.get_var(variable_name)
            except Exception as error:  # any failure means the variable is unset
                logger.debug("Initial value load failed for %s: %s", name, error)
                with self._lock:
                    reader = self._readers[name]
                setting = reader()
                try:
                    await nvim.set_var(variable_name, setting)
                except Exception as set_error:
                    logger.debug("Could not publish %s: %s", variable_name, set_error)
            else:
                with self._lock:
                    listener = self._listeners[name]
                listener(value)

    def listener_commands(self) -> list[str]:
        """Editor commands that report changes of each registered variable."""
        function_prefix = self.var_prefix[:1].upper() + self.var_prefix[1:]
        commands = []
        for name in self._names():
            variable_name = self.variable_name(name)
            function_name = f"{function_prefix}Notify{name}Changed"
            commands.append(
                'exe "'
                f"fun! {function_name}(d, k, z)\n"
                f"call rpcnotify(1, 'setting_changed', '{name}', g:{variable_name})\n"
                "endf\n"
                f"call dictwatcheradd(g:, '{variable_name}', '{function_name}')\""
            )
        return commands

    def handle_changed_notification(self, arguments: list[Any]) -> None:
        """Apply a ``[name, value]`` change notification."""
        values = iter(arguments)
        try:
            name = next(values)
            value = next(values)
        except StopIteration:
            raise ValueError(
                "A setting change notification needs a name and a value"
            ) from None
        if not isinstance(name, str):
            raise TypeError(f"Setting name must be a string, got {name!r}")
        with self._lock:
            try:
                listener = self._listeners[name]
            except KeyError:
                raise KeyError(f"No handler registered for setting {name!r}") from None
        listener(value)


SETTINGS = Settings()