"""
Configuration modules read through sovest.support.Config
"""
