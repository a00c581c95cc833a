"""Pure evaluation runtime for Tartan Home."""
