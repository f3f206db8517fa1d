"""
Experience app

Purpose: Keep a model's skills, professional experiences and geographic
work preferences as JSON collections in a per-user key-value store.
"""
