"""Performance benchmarks for wavestring.

Microbenchmarks for the hot paths: single steps and elapsed-time advances.
"""
