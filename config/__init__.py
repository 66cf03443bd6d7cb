"""
config package
--------------

Project paths and the static JSON configuration (engine constants and the
canonical class criteria definitions loaded into the registry at start-up).
"""
