"""Output layer: human (Rich) and JSON rendering of service results."""
