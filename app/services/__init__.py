"""
Service layer: job persistence and the job actions built on it.
"""
