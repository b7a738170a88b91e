"""Runtime package.

Settings loading, logging setup and dependency construction for the server.
"""

__all__: list[str] = []
