"""Service layer: validation, persistence and the sign-up flow."""
