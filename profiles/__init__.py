"""
Profiles app

Purpose: Keep a model's personal information, bilingual biography and body
measurements as per-user JSON documents.
"""
