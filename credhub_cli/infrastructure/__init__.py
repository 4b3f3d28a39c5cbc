"""Infrastructure layer: adapters for CredHub, authentication and output."""
