from typing import List


SUPPRESSED_ATTR = "__autoclose_suppressed__"


class AutoCloseError(Exception):
    pass


class ResourceReleaseError(AutoCloseError):
    def __init__(self, name: str):
        super(ResourceReleaseError, self).__init__(f"Failed to release {name}")
        self.name = name


class SqlError(AutoCloseError):
    pass


class WorkFailedError(AutoCloseError):
    pass


def add_suppressed(error: BaseException, suppressed: BaseException) -> BaseException:
    """
    Attach `suppressed` to `error`, after any errors attached before it.
    An error is never attached to itself; it is already the one reported.
    Returns `error` so the call can be used in a raise statement.
    """
    if suppressed is error:
        return error
    errors = error.__dict__.get(SUPPRESSED_ATTR)
    if errors is None:
        errors = []
        setattr(error, SUPPRESSED_ATTR, errors)
    errors.append(suppressed)
    return error


def get_suppressed(error: BaseException) -> List[BaseException]:
    return list(error.__dict__.get(SUPPRESSED_ATTR, ()))
