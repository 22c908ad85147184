"""
Runtime: resolución de rutas del home de Apollo.

Las rutas se calculan en cada llamada; nada se cachea ni se crea en disco.
"""

from apollo.core.runtime.layout import apollo_home, apollo_home_bin, describe_layout
from apollo.core.runtime.models import ApolloLayout, resolve_layout
from apollo.core.runtime.provider import HomeProvider, default_home_provider

__all__ = [
    "apollo_home",
    "apollo_home_bin",
    "describe_layout",
    "ApolloLayout",
    "resolve_layout",
    "HomeProvider",
    "default_home_provider",
]
