"""db/ -- Persistence context (SQLAlchemy Core). Imports only from core/."""
