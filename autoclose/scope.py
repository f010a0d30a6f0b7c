from contextlib import contextmanager
import logging
from typing import Callable, Iterator, TypeVar

from autoclose.manager import ResourceManager
from autoclose.outcome import Failure, Outcome, Success


T = TypeVar("T")


def using(work: Callable[[ResourceManager], T]) -> T:
    """
    Run `work` with a fresh `ResourceManager` and release everything it
    registered, last registered first, once it is done.

    If `work` raises, that error is re-raised after the release sweep with any
    release errors attached to it as suppressed. If `work` returns but some
    release fails, the first release error is raised instead of returning the
    value, with later release errors attached to it.
    """
    manager = ResourceManager()
    closed = False
    try:
        return work(manager)
    except BaseException as e:
        closed = True
        logging.debug("[SCOPE] Work failed with %r, releasing %d resources", e, len(manager))
        manager.release_all_after_failure(e)
    finally:
        if not closed:
            logging.debug("[SCOPE] Work done, releasing %d resources", len(manager))
            error = manager.release_all()
            if error is not None:
                raise error


def run_scoped(work: Callable[[ResourceManager], T]) -> Outcome:
    """
    Same as `using` but reports the result as `Success` or `Failure` instead
    of raising. KeyboardInterrupt and SystemExit still propagate.
    """
    try:
        return Success(using(work))
    except Exception as e:
        return Failure.create(e)


@contextmanager
def scoped() -> Iterator[ResourceManager]:
    manager = ResourceManager()
    try:
        yield manager
    except BaseException as e:
        logging.debug("[SCOPE] Block failed with %r, releasing %d resources", e, len(manager))
        manager.release_all_after_failure(e)
    logging.debug("[SCOPE] Block done, releasing %d resources", len(manager))
    error = manager.release_all()
    if error is not None:
        raise error
