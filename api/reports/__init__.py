"""
Newsfeed post reports: intake, listing and removal.
"""
