"""Service layer — validator operations returning ServiceResult."""
