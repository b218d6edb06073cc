"""
Roast levels (seeded reference vocabulary).
"""
