import asyncio
import logging
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, TextIO

from txdb.models.exceptions import MalformedCommandError
from .command import Command

logger = logging.getLogger()


class LineReader(Protocol):
    async def readline(self) -> bytes: ...


@dataclass
class Route:
    handler: Callable[..., Any]
    arity: int
    description: str


class Shell:
    DEFAULT_MAX_LINE_LENGTH = 64 * 1024
    TERMINATE = 'END'
    INVALID_INPUT = 'INVALID INPUT'

    def __init__(self, out: Optional[TextIO] = None, max_line_length: int = DEFAULT_MAX_LINE_LENGTH):
        if max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {max_line_length}")

        self.out = out if out is not None else sys.stdout
        self.max_line_length = max_line_length
        self.commands: Dict[str, Route] = {}
        self.running = False

        # One command at a time against the store
        self._lock = asyncio.Lock()

    def command(self, name: str, arity: int = 0, description: str = ''):
        """Decorator for registering command handlers"""
        if arity < 0 or arity > Command.MAX_TOKENS - 1:
            raise ValueError(f"arity must be between 0 and {Command.MAX_TOKENS - 1}, got {arity}")

        def decorator(handler):
            self.commands[name.upper()] = Route(handler=handler, arity=arity, description=description)
            return handler
        return decorator

    def describe(self) -> list[str]:
        lines = [f"{name}: {route.description}" for name, route in self.commands.items()]
        lines.append(f"{self.TERMINATE}: Exit the program.")
        return lines

    def parse(self, line: str) -> Command:
        command = Command.parse(line, max_length=self.max_line_length)

        if command.name == self.TERMINATE:
            if command.args:
                raise MalformedCommandError(line, f"{self.TERMINATE} takes no arguments")
            return command

        route = self.commands.get(command.name)
        if route is None:
            raise MalformedCommandError(line, f"unknown command {command.name}")

        if len(command.args) != route.arity:
            raise MalformedCommandError(
                line, f"{command.name} expects {route.arity} argument(s), got {len(command.args)}"
            )

        return command

    def render(self, result: Any) -> Optional[str]:
        """Turn a handler result into an output line, None meaning no output"""
        if result is None:
            return None
        if isinstance(result, bytes):
            return result.decode()
        return str(result)

    async def handle_line(self, line: str) -> Optional[str]:
        """Dispatch one input line and return its output, if any"""
        if not line.strip():
            return None

        try:
            command = self.parse(line)
        except MalformedCommandError as e:
            logger.warning(f"Rejected input: {e.reason}")
            return f"{self.INVALID_INPUT}: {e.line}"

        if command.name == self.TERMINATE:
            self.running = False
            return None

        start_time = time.perf_counter()
        logger.debug(f"--> {command.name}")

        try:
            async with self._lock:
                result = self.commands[command.name].handler(*command.args)
        except Exception as e:
            logger.error(f"Handler error: {e}")
            return f"{self.INVALID_INPUT}: {line}"

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"<-- {command.name} - {elapsed_ms:.2f}ms")

        return self.render(result)

    def emit(self, text: str):
        self.out.write(f"{text}\n")
        self.out.flush()

    async def run(self, reader: LineReader):
        """Read and execute commands until END or end of input"""
        self.running = True
        logger.info("Shell started")

        try:
            while self.running:
                try:
                    raw = await reader.readline()
                except ValueError as e:
                    # StreamReader refuses lines over its buffer limit
                    logger.warning(f"Rejected input: {e}")
                    self.emit(f"{self.INVALID_INPUT}: line too long")
                    continue

                if not raw:
                    break

                line = raw.decode('utf-8', errors='replace').rstrip('\r\n')
                output = await self.handle_line(line)
                if output is not None:
                    self.emit(output)
        finally:
            self.running = False
            logger.info("Shell stopped")
