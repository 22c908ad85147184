"""
Punto de entrada: python -m apollo

Delega en la misma app que el script ap (apollo.cli.app).
"""

from apollo.cli.app import main

if __name__ == "__main__":
    main()
