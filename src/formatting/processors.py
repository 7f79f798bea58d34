"""Format processors converting an artifact file into a caller-chosen type."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Generic, TypeVar, Union

T = TypeVar("T")


class FormatProcessor(ABC, Generic[T]):
    """Converts the path of a mapped artifact file into a value of type ``T``.

    Invoked once per artifact; implementations may have side effects such as
    opening a stream.
    """

    @abstractmethod
    def process(self, path: str) -> T:
        """Convert ``path``."""
        raise NotImplementedError


class FileFormatProcessor(FormatProcessor[str]):
    """Returns the file path unchanged."""

    def process(self, path: str) -> str:
        return path


class InputStreamFormatProcessor(FormatProcessor[BinaryIO]):
    """Opens the file for binary reading; the caller owns the stream."""

    def process(self, path: str) -> BinaryIO:
        return open(path, "rb")


class CallableFormatProcessor(FormatProcessor[T]):
    """Adapts a plain ``path -> T`` callable."""

    def __init__(self, func: Callable[[str], T]):
        self.func = func

    def process(self, path: str) -> T:
        return self.func(path)


ProcessorLike = Union[FormatProcessor[T], Callable[[str], T]]


def as_processor(processor: ProcessorLike) -> FormatProcessor:
    """Return ``processor`` as a FormatProcessor, wrapping bare callables."""
    if processor is None:
        raise ValueError("Format processor must not be None")
    if isinstance(processor, FormatProcessor) or hasattr(processor, "process"):
        return processor  # type: ignore[return-value]
    if callable(processor):
        return CallableFormatProcessor(processor)
    raise ValueError(f"Unsupported format processor: {processor!r}")


FILE_PROCESSOR = FileFormatProcessor()
INPUT_STREAM_PROCESSOR = InputStreamFormatProcessor()
