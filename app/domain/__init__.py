"""
Domain layer containing core business logic and domain services.

Submodules:
- watch: Watch-link resolution and event-code binding.
- utils: Domain-specific utilities (e.g., ID generation).
"""
