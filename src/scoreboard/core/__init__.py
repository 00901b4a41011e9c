"""
Core application setup (logging)
"""
