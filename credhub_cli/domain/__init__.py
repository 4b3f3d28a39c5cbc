"""Domain layer: credential envelopes, value variants and domain errors."""
