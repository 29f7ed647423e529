"""Choosing the original and quarantining the rejects."""
