"""Resolver package for the GraphQL schema.

Resolvers read the user directory from the GraphQL context and convert
directory records into GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
