"""HTTP quote service for the bonding curve."""
