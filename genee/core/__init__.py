"""
Core utilities shared by every genee component: exceptions, logging,
validation, configuration, paths and backups.
"""
