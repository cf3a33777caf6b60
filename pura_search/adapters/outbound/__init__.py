"""Storage-side adapters implementing the corpus ports."""
