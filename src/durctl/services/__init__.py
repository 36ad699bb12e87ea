"""Service layer: wraps the domain in the ServiceResult contract."""
