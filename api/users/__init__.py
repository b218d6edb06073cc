"""
Users. Only the public {id, username} projection ever leaves this package.
"""
