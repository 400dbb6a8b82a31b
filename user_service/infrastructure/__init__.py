"""
Infrastructure layer for the User Service.

Holds the database engine and session plumbing and the repositories
that read and write the user tables.
"""
