"""
Infrastructure layer for the Product Service.

Holds the database engine and session plumbing and the repositories
that read and write the product table.
"""
