"""Domain services.

Pure business logic: the mapping core and the profiling helpers that prepare
its input records.
"""
