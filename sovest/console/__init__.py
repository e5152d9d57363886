"""
Console Package
Artisan-style command runner
"""
