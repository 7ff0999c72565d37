from typing import Any, TypeVar

from typing_extensions import Protocol

B = TypeVar('B', covariant=True)


class Variadic(Protocol[B]):
    def __call__(self, *args: Any, **kwargs: Any) -> B:
        pass


class Tagged(Protocol):
    __placeholder__: bool
