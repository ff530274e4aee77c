"""
Feature modules for the Linkora backend.

Each module is self-contained with its own:
- models.py: Pydantic models for data transfer
- exceptions.py: Module-specific exceptions
- interfaces.py: Protocol definitions, where the module has collaborators
- service.py / catalog.py: Business logic or static data
- routes.py: FastAPI route handlers, for modules exposed over HTTP

Modules communicate through interfaces, not concrete implementations.
"""
