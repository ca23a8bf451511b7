"""Code Breaker: a single-session Mastermind-style number guessing service."""
