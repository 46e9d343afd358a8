"""Page entity returned by paged repositories."""

from dataclasses import dataclass, field
from typing import Generic, Iterator, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One bounded batch of items returned by a single search request.

    Items are already decoded and ordered as requested. ``is_last`` is an
    explicit end-of-data signal from the repository; an empty page carries
    the same meaning.
    """

    items: Tuple[T, ...] = field(default_factory=tuple)
    is_last: bool = False

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, items: Sequence[T], is_last: bool = False) -> "Page[T]":
        return cls(items=tuple(items), is_last=is_last)

    @classmethod
    def empty(cls) -> "Page[T]":
        return cls(items=(), is_last=True)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)
