"""Terminal output: the manga report."""
