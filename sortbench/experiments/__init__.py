"""Experiment batches sweeping input sizes and seeds.

Provides utilities to generate run configurations, execute them, persist
run-level results and aggregate them into CSV tables.
"""
