"""Services Layer — request handling between routes and repositories.

Invariants:
    - Services never touch AsyncSession; storage goes through core.repository_protocols
"""
