"""HyperTerm test suite."""
