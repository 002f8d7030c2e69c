"""
User account helpers used by other features (confirmation tokens).
"""
