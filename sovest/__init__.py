"""
SoVest
Named-route URL generation for the SoVest prediction platform
"""
__version__ = '1.0.0'
