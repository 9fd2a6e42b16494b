"""Extraction kernel: resolver, extractor, merge engine, diagnostics and store."""
