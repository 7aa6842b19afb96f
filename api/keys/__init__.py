"""
Keys resource: schemas, SQL, business rules and HTTP routes.
"""
