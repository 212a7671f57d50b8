"""Service layer: operations over the identifier domain.

Every public service method returns a :class:`ServiceResult`.
"""
