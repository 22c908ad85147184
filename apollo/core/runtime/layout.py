"""
Resolución de rutas del home de Apollo.

    ~/
        .apollo/
            bin/
                ap
                apollo-language-server
            atlas/
            auth.toml

- apollo_home(): directorio raíz de configuración/datos (~/.apollo).
- apollo_home_bin(): directorio de binarios (~/.apollo/bin).

El core NO escribe en disco ni comprueba que las rutas existan; solo las calcula.
Quién crea o lee (instaladores, language server) usa estas rutas.
"""

from pathlib import PurePath
from typing import List, Optional, Tuple

from apollo.core.errors import NoHomeEnvironmentVar
from apollo.core.runtime.provider import HomeProvider, default_home_provider


APOLLO_DIR_NAME = ".apollo"
BIN_DIR_NAME = "bin"
ATLAS_DIR_NAME = "atlas"
AUTH_FILE_NAME = "auth.toml"
BIN_ENTRIES = ("ap", "apollo-language-server")

LayoutNode = Tuple[str, List["LayoutNode"]]


def apollo_home(provider: Optional[HomeProvider] = None) -> PurePath:
    """
    Directorio home de Apollo: <home>/.apollo.
    Lanza NoHomeEnvironmentVar si el provider no devuelve home.
    """
    home = (provider or default_home_provider)()
    if home is None:
        raise NoHomeEnvironmentVar()
    return home / APOLLO_DIR_NAME


def apollo_home_bin(provider: Optional[HomeProvider] = None) -> PurePath:
    """Directorio de binarios: <home>/.apollo/bin. Los errores de apollo_home se propagan."""
    return apollo_home(provider) / BIN_DIR_NAME


def describe_layout() -> List[LayoutNode]:
    """
    Estructura documentada bajo .apollo, como (nombre, hijos).
    Solo informativa: nada de esto se crea ni se lee aquí.
    """
    return [
        (BIN_DIR_NAME + "/", [(name, []) for name in BIN_ENTRIES]),
        (ATLAS_DIR_NAME + "/", []),
        (AUTH_FILE_NAME, []),
    ]
