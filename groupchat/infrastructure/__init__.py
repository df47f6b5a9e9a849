"""Infrastructure — database engine/session management, SQL store, logging.
"""
