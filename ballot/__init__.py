"""Ballot: elections, candidates and one-vote-per-address tallies behind an HTTP API."""

__version__ = "0.1.0"
