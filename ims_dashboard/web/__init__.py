"""
Web - server-rendered dashboard pages.
"""
