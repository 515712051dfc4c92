"""
Beyond TCG catalog backend.
"""
