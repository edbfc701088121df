"""Service layer: retention resolution and dataset loading."""
