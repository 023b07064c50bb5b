"""Solver adapters (pymoo)."""
