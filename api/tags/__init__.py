"""
Tags and their many-to-many link to recipes (through `tag_recipe`).
"""
