"""
Research Lab Dashboard
"""
