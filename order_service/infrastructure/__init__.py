"""
Infrastructure layer for the Order Service.

Holds the database engine and session plumbing and the repositories
that read and write the order tables.
"""
