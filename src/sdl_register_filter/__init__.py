"""Register-scoped filtering of GraphQL SDL schemas."""
