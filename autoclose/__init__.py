from autoclose.errors import AutoCloseError, add_suppressed, get_suppressed  # NOQA
from autoclose.manager import ResourceManager  # NOQA
from autoclose.outcome import Failure, Outcome, Success  # NOQA
from autoclose.scope import run_scoped, scoped, using  # NOQA
