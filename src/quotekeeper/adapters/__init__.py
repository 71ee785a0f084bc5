"""Adapters connecting the quote domain to storage, HTTP and the console."""
