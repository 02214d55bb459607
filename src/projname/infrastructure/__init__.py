"""Infrastructure layer: adapters over third-party libraries."""
