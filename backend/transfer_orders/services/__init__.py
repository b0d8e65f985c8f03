"""Services Layer — business rules layered over the store.

Invariants:
    - Services never touch storage internals, only the store's public operations
    - No service depends on fields outside the transfer order model

Design Decisions:
    - One service class per resource, constructed per request from the store singleton
"""
