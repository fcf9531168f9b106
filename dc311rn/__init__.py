"""Reply bot for DC 311 service request tweets."""
