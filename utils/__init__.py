"""
utils package
-------------

Contains utility modules used throughout the criteria service.

Includes the shared logger and the constants loaded from config/constants.json.
"""
