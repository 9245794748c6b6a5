"""Service layer: question aggregation, catalog queries and dataset access."""
