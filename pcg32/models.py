from dataclasses import dataclass
from typing import Dict

from .bits import MASK64


def _is_word(value) -> bool:
    # bool is an int subclass; True/False are never valid state words
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_word(name: str, value) -> int:
    if isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError as exc:
            raise ValueError(f"{name} is not an integer literal: {value!r}") from exc
    if _is_word(value):
        return value
    raise ValueError(f"{name} must be an int or an integer string, received {value!r}")


@dataclass(frozen=True)
class GeneratorState:
    """Resumable ``(state, stream)`` pair captured from a generator."""

    state: int
    stream: int

    def __post_init__(self) -> None:
        for name in ("state", "stream"):
            word = getattr(self, name)
            if not _is_word(word):
                raise ValueError(f"{name} must be an int, received {word!r}")
            if not 0 <= word <= MASK64:
                raise ValueError(f"{name} must fit in 64 bits, received {word!r}")
        if self.stream & 1 == 0:
            raise ValueError(f"stream must be odd, received {self.stream:#x}")

    def as_dict(self) -> Dict[str, str]:
        return {"state": f"{self.state:#018x}", "stream": f"{self.stream:#018x}"}

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "GeneratorState":
        """Accepts hex strings (as written by ``as_dict``) or plain ints."""
        try:
            state = _parse_word("state", payload["state"])
            stream = _parse_word("stream", payload["stream"])
        except KeyError as exc:
            raise ValueError(f"generator state payload is missing {exc.args[0]!r}") from exc
        return cls(state=state, stream=stream)
