"""HTTP API for the BuildReady calculators."""
