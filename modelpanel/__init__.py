"""
Model Panel project

Administrative backend for fashion-model profiles.
"""
