import logging
from typing import Any, Callable, Iterator, List, NoReturn, Optional, Tuple, TypeVar

from autoclose.errors import add_suppressed


T = TypeVar("T")


def close_resource(resource: Any) -> None:
    resource.close()


class ResourceManager:
    """
    Keeps the resources acquired inside one scope, in acquisition order, and
    releases them back to front. A resource is anything with a `close()`
    method; other handles can be registered with an explicit `release`
    function.
    """

    def __init__(self):
        self.handles: List[Tuple[Any, Callable[[Any], Any]]] = []
        self.released = False

    def register(self, resource: T, release: Optional[Callable[[Any], Any]] = None) -> T:
        if resource is not None:
            self.handles.append((resource, release or close_resource))
        return resource

    auto_close = register

    def __len__(self) -> int:
        return len(self.handles)

    def __iter__(self) -> Iterator[Any]:
        return (h for h, _ in self.handles)

    def release_all(self) -> Optional[BaseException]:
        """
        Release everything after the scope finished without an error. The
        first release error is returned with every later one attached to it
        as suppressed; None if all releases succeeded.
        """
        error: Optional[BaseException] = None
        for e in self._sweep():
            if error is None:
                error = e
            else:
                add_suppressed(error, e)
        return error

    def release_all_after_failure(self, error: BaseException) -> NoReturn:
        """
        Release everything after the scope failed with `error`. Release errors
        are attached to `error` as suppressed and `error` is re-raised.
        """
        for e in self._sweep():
            add_suppressed(error, e)
        raise error

    def _sweep(self) -> Iterator[BaseException]:
        if self.released:
            logging.debug("[RELEASE] Resources already released, skipping")
            return
        self.released = True
        for handle, release in reversed(self.handles):
            try:
                release(handle)
            except BaseException as e:
                logging.debug("[RELEASE] Failed to release %r: %r", handle, e)
                yield e
