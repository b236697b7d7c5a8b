"""Click command groups for the gledger CLI."""
