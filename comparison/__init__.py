"""Side-by-side comparison of the coupled and inverted approaches."""
