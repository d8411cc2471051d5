"""Infrastructure Layer — entity store, credentials/tokens, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Third-party security primitives (werkzeug, PyJWT) are wrapped here, nowhere else
"""
