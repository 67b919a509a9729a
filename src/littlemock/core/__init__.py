"""Mocking engine: matchers, stubs, call ledger and verification."""
