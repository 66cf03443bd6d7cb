"""
core
----

Criteria engine components:

- criteria:
  Immutable class criteria models (age, course and mark ranges) and the reserved
  generation class tokens.

- ranges / combiner:
  Range intersection and merging of two class criteria into a composite class.

- registry:
  Lookup of class-name tokens to their criteria, including combined classes.

- parser / analyser:
  Parse criteria lines like "10S - 3A2B1C", validate them against the declared
  total and combine conflicting classes.
"""
