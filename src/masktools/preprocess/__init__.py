"""Input preparation helpers applied around mask construction."""
