"""
Core: lógica pura de Apollo.

ENFORCEMENT:
- Este paquete NO debe importar apollo.cli ni escribir en el filesystem.
- Permitido: typing, pathlib, pydantic, apollo.core.*.
- La CLI importa desde core; nunca al revés.
"""

from apollo.core.errors import ApolloError, ConfigError, NoHomeEnvironmentVar

__all__ = ["ApolloError", "ConfigError", "NoHomeEnvironmentVar"]
