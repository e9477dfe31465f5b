import asyncio
import logging
import os
import sys

from command_shell.shell import Shell
from txdb import Store, TransactionResult

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

NULL_OUTPUT = "NULL"


class StdinReader:
    """Line source over stdin that works for ttys, pipes and redirected files."""

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stdin.buffer

    async def readline(self) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._stream.readline)


def transaction_output(result: TransactionResult) -> str | None:
    return None if result is TransactionResult.OK else result.value


def register_commands(shell: Shell, store: Store) -> None:

    @shell.command("SET", arity=2, description="Set the variable name to the value value.")
    def set_value(key: str, value: str) -> None:
        store.set(key, value)

    @shell.command("GET", arity=1, description="Print out the value of the variable name, or NULL if that variable is not set.")
    def get_value(key: str) -> str:
        value = store.get(key)
        return NULL_OUTPUT if value is None else value

    @shell.command("UNSET", arity=1, description="Unset the variable name, making it just like that variable was never set.")
    def unset_value(key: str) -> None:
        store.unset(key)

    @shell.command("NUMEQUALTO", arity=1, description="Print out the number of variables that are currently set to value.")
    def num_equal_to(value: str) -> int:
        return store.count_equal_to(value)

    @shell.command("BEGIN", description="Open a new transaction block. Transaction blocks can be nested.")
    def begin() -> None:
        store.begin()

    @shell.command("ROLLBACK", description="Undo all of the commands issued in the most recent transaction block, and close the block.")
    def rollback() -> str | None:
        return transaction_output(store.rollback())

    @shell.command("COMMIT", description="Close all open transaction blocks, permanently applying the changes made in them.")
    def commit() -> str | None:
        return transaction_output(store.commit())


async def main():
    max_line_length = int(os.environ.get("TXDB_MAX_LINE_LENGTH", Shell.DEFAULT_MAX_LINE_LENGTH))
    shell = Shell(max_line_length=max_line_length)
    store = Store()
    register_commands(shell, store)
    logger.debug(f"Registered commands: {sorted(shell.commands)}")
    await shell.run(StdinReader())


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
