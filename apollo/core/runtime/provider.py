"""
Provider del directorio home del usuario.

Un provider es cualquier callable sin argumentos que devuelve la ruta home
del usuario actual, o None si la plataforma no la expone.
"""

import os
from pathlib import Path, PurePath
from typing import Callable, Optional


HomeProvider = Callable[[], Optional[PurePath]]


def _passwd_home() -> Optional[PurePath]:
    """Home según la entrada de passwd del usuario actual (solo POSIX)."""
    import pwd

    try:
        pw_dir = pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None
    if not pw_dir:
        return None
    home = Path(pw_dir)
    return home if home.is_absolute() else None


def default_home_provider() -> Optional[PurePath]:
    """
    Home del usuario según la plataforma (Path.home()).

    Un HOME vacío cuenta como no definido y se resuelve por passwd.
    Devuelve None si la plataforma no puede resolverlo.
    """
    # expanduser convierte HOME="" en "/"
    if os.name == "posix" and os.environ.get("HOME") == "":
        return _passwd_home()
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    if not home.is_absolute():
        return None
    return home
