"""Service layer: application-facing operations that sit beside the domain."""
