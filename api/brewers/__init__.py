"""
Brewing devices (seeded reference vocabulary).
"""
