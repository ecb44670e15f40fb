"""Test suite for the graphvalidator object graph validation engine.

This package contains tests for:
- Result tree paths, prefixes, flattening and serialization
- Validation mode policy (collect all, fail fast, force fail)
- Validation builder decomposition (properties, functions, collections, maps)
- Validator entry points and error handling
- The built-in assertion catalog
"""
