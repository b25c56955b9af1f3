"""Paytrack: payments-tracking REST API."""
