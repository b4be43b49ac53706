"""Duel history lookup for the Pistols at Dawn world."""
