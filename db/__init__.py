"""
db/ - Database Layer
====================
Opens database connections, bootstraps the schema and defines the
error types raised by the session.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
