"""
Configuration for the lead qualification engine.
"""
