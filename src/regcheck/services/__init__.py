"""Service layer: wraps the domain predicates into ServiceResult objects."""
