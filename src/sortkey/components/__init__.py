"""Key-space building blocks: parsed keys, band arithmetic, midpoints, sequences."""
