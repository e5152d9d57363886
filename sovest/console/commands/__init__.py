"""
Built-in commands, discovered by Artisan
"""
