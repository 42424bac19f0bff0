"""Service layer composing the BuildReady calculators."""
