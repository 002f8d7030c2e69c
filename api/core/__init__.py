"""
Shared, cross-cutting code for the API.

`core/` holds the pieces every feature package uses (DB wiring, logging).
Report and account SQL and business rules stay in their own packages.
"""
