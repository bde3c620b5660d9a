"""
Service layer.

Each service encapsulates the business logic of one operation and
talks to the database only through ``UserStore``.
"""
