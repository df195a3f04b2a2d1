"""auth/ -- Token issuance, verification, and FastAPI auth dependencies.

Layer rule: auth/ imports only core/ + third-party libraries.
It does NOT import from api/, db/, or services/.
api/ imports from auth/, not the other way around.
"""
