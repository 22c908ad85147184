"""
Errores de Apollo.

El core solo define excepciones; las capas (CLI) se encargan del formato de salida.
"""


class ApolloError(Exception):
    """Error base de Apollo."""
    pass


class ConfigError(ApolloError):
    """Error de configuración o de entorno del proceso."""
    pass


class NoHomeEnvironmentVar(ConfigError):
    """El entorno no permite descubrir el directorio home del usuario."""

    def __init__(self, message: str = "No se pudo determinar el directorio home del usuario actual"):
        super().__init__(message)
