"""Service layer: adapts the pure validation core to callers.

Every public service method returns a ServiceResult.
"""
