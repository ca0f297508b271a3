"""Package resources for psfontmap."""
