"""Validation and aggregation over generated org charts."""
