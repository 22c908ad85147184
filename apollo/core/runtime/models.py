"""
Modelo del layout resuelto (solo lectura, para reportes de la CLI).
"""

from pathlib import PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from apollo.core.runtime.layout import apollo_home, apollo_home_bin
from apollo.core.runtime.provider import HomeProvider


class ApolloLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    home: PurePath = Field(..., description="Directorio home de Apollo (~/.apollo)")
    bin: PurePath = Field(..., description="Directorio de binarios (~/.apollo/bin)")


def resolve_layout(provider: Optional[HomeProvider] = None) -> ApolloLayout:
    """Resuelve ambas rutas; NoHomeEnvironmentVar se propaga sin cambios."""
    return ApolloLayout(home=apollo_home(provider), bin=apollo_home_bin(provider))
