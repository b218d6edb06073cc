"""
Recipes: lookups by id, slug, title, roaster and machine, plus creation.
"""
