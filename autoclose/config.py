import os
from pathlib import Path

from dynaconf import Dynaconf  # type: ignore


settings = Dynaconf(
    envvar_prefix="AUTOCLOSE",
    settings_files=[os.fspath(Path(__file__).parent / "settings.toml")],
)
