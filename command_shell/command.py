from dataclasses import dataclass, field

from txdb.models.exceptions import MalformedCommandError


@dataclass
class Command:
    name: str
    args: list[str] = field(default_factory=list)
    line: str = ""

    MAX_TOKENS = 3

    @classmethod
    def parse(cls, line: str, max_length: int | None = None) -> "Command":
        """Split a line into an upper-cased command name and its arguments"""
        if max_length is not None and len(line) > max_length:
            raise MalformedCommandError(line[:max_length], f"line longer than {max_length} characters")

        tokens = line.split()
        if not tokens:
            raise MalformedCommandError(line, "empty command")

        if len(tokens) > cls.MAX_TOKENS:
            raise MalformedCommandError(line, f"expected at most {cls.MAX_TOKENS} tokens, got {len(tokens)}")

        return cls(name=tokens[0].upper(), args=tokens[1:], line=line)

    def arg(self, index: int, default: str | None = None) -> str | None:
        if index < 0:
            raise ValueError("Index cannot be negative")

        if index < len(self.args):
            return self.args[index]

        return default
