"""Clients for the individual Mars contracts.

Each schema is its own instantiation of the query/execute/binding pattern;
types are never shared across contract versions except ``OwnerUpdate``.
"""
