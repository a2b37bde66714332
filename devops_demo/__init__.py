"""DevOps demo service: health, version and canned-error HTTP endpoints."""
