"""Betting process simulation: strategies, trial generation, players, batches and sweeps."""
