"""
Core models, validators and rule engine.
"""
