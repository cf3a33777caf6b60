"""Adapters connecting the search core to storage, HTTP and the command line."""
