"""core/ -- Configuration, domain types, and validation. Imports nothing from the other layers."""
