"""
Service layer: business logic between routes and repositories.

Services own the transaction: repositories only flush, and each
mutating service function commits once its audit entry is recorded.
"""
