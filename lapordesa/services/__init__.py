"""
Service layer.

Services hold the business rules and return ``ServiceResult`` objects;
the API layer turns failed results into HTTP errors.
"""
