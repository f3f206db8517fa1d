"""
Accounts app

Purpose: Panel users and the role that decides which sections they see.
"""
