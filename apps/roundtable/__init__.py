"""Roundtable: interview question catalog API."""
